"""Reports routes and models."""
