"""API routers, one per catalog resource."""
