"""Mentorship routes and models."""
