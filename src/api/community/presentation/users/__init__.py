"""Users routes and models."""
