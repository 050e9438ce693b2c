"""FastAPI controller for user active games."""
