"""Command line interface for catalogadmin."""
