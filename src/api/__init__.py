"""HTTP layer: FastAPI application, routers, and request-scoped wiring."""
