"""HTTP API for the file converter (FastAPI app, response models)."""
