"""Ports (repository protocols and lookup errors) for the mentoring context."""
