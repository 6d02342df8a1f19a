"""HTTP API layer: routers, dependencies and the application factory."""
