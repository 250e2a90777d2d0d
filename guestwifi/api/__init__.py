"""HTTP API layer - FastAPI application, routes and wire models."""
