"""Service layer for catalogadmin."""
