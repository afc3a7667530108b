"""REST API package for catalogadmin."""
