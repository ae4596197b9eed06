"""Web adapter (FastAPI) for the widget store."""
