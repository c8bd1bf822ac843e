"""Auth routes and models."""
