"""
Admin client for the catalog API.

HTTP resource wrappers, the URL-synchronized filter state of list tables,
and the list controller that keeps a table in step with its filters.
"""
