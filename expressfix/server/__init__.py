"""ExpressFix HTTP server: FastAPI application, routers and services."""
