"""Application layer for the community bounded context."""
