"""HTTP resource routers."""
