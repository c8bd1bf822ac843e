"""Helpers for interpreting database driver errors."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError


def violates_unique_constraint(error: IntegrityError, *markers: str) -> bool:
    """Check whether an IntegrityError was caused by a given unique constraint.

    PostgreSQL reports the constraint name while SQLite reports the
    constrained columns, so callers pass every form they expect.

    Args:
        error: The IntegrityError raised on flush
        markers: Constraint names or "table.column" fragments to look for

    Returns:
        True if the driver message is a uniqueness failure mentioning any marker
    """
    message = str(error.orig) if error.orig is not None else str(error)
    if "unique" not in message.lower():
        return False
    return any(marker in message for marker in markers)
