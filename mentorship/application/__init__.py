"""Application layer: use-case services behind the API routers."""
