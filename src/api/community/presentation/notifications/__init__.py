"""Notifications routes and models."""
