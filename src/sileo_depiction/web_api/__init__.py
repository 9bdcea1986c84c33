"""HTTP API for rendering depictions (FastAPI)."""
