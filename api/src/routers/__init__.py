"""API routers, one per entity family, mounted under the API prefix."""
