"""Application layer for the mentoring context."""
