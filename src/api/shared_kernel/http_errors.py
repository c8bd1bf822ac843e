"""Translation of domain errors into HTTP responses.

Routes call ``to_http_exception`` inside their ``except DomainError`` branch
so that status codes stay consistent across bounded contexts.
"""

from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException, status

from shared_kernel.exceptions import (
    AlreadyExistsError,
    DomainError,
    NotAuthenticatedError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from shared_kernel.identifiers import EntityId

IdT = TypeVar("IdT", bound=EntityId)

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
)


def status_code_for(error: DomainError) -> int:
    """Return the HTTP status code for a domain error.

    Unknown DomainError subclasses map to 400 since they are still expected,
    caller-facing failures.
    """
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def to_http_exception(error: DomainError) -> HTTPException:
    """Build the HTTPException for a domain error.

    Args:
        error: The typed failure raised by a service

    Returns:
        HTTPException carrying the mapped status code and the error message
    """
    code = status_code_for(error)
    headers = None
    if code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(status_code=code, detail=str(error), headers=headers)


def parse_identifier(id_type: type[IdT], raw: str, label: str) -> IdT:
    """Parse a path parameter into a typed identifier.

    Args:
        id_type: The EntityId subclass to build
        raw: The raw path value
        label: Resource name used in the error message (e.g. "group")

    Raises:
        HTTPException: 400 if ``raw`` is not a valid ULID
    """
    try:
        return id_type.from_string(raw)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label} ID format",
        ) from e
