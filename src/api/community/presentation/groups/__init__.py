"""Groups routes and models."""
