"""HTTP API: FastAPI application factory, exception handlers and resource routers."""
