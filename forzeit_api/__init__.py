"""HTTP surface of Forzeit (FastAPI)."""
