"""FastAPI dependency providers for the community bounded context."""
