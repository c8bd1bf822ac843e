"""Ports (repository protocols and lookup errors) for the community context."""
