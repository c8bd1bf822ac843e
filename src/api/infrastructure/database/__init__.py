"""Database infrastructure - shared connection primitives."""

from infrastructure.database.exceptions import violates_unique_constraint

__all__ = [
    "violates_unique_constraint",
]
