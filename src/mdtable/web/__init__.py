"""FastAPI view for the editor."""
