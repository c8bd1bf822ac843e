"""FastAPI dependency providers for the mentoring context."""
