"""HTTP API: FastAPI app factory, routes and dependency wiring."""
