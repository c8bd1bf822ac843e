"""Content routes and models."""
