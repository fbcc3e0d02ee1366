"""Web API for folio (FastAPI)."""
