"""Unit tests for mapping domain errors to HTTP responses."""

import pytest
from fastapi import HTTPException, status

from shared_kernel.exceptions import (
    AlreadyExistsError,
    DomainError,
    InsufficientRoleError,
    NotAMemberError,
    NotAuthenticatedError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from shared_kernel.http_errors import (
    parse_identifier,
    status_code_for,
    to_http_exception,
)
from shared_kernel.identifiers import EntityId


@pytest.mark.parametrize(
    "error,expected",
    [
        (NotFoundError("missing"), status.HTTP_404_NOT_FOUND),
        (ValidationError("bad"), status.HTTP_400_BAD_REQUEST),
        (PermissionDeniedError("no"), status.HTTP_403_FORBIDDEN),
        (NotAMemberError(), status.HTTP_403_FORBIDDEN),
        (InsufficientRoleError(), status.HTTP_403_FORBIDDEN),
        (AlreadyExistsError("dup"), status.HTTP_409_CONFLICT),
        (NotAuthenticatedError(), status.HTTP_401_UNAUTHORIZED),
        (DomainError("other"), status.HTTP_400_BAD_REQUEST),
    ],
)
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected


def test_message_becomes_detail():
    exc = to_http_exception(NotFoundError("Group 01H not found"))

    assert exc.status_code == status.HTTP_404_NOT_FOUND
    assert exc.detail == "Group 01H not found"
    assert exc.headers is None


def test_unauthenticated_carries_bearer_challenge():
    exc = to_http_exception(NotAuthenticatedError())

    assert exc.headers == {"WWW-Authenticate": "Bearer"}
    assert exc.detail == "authentication required"


class TestParseIdentifier:
    def test_valid_ulid(self):
        raw = EntityId.generate().value
        assert parse_identifier(EntityId, raw, "group").value == raw

    def test_invalid_value_is_400(self):
        with pytest.raises(HTTPException) as exc_info:
            parse_identifier(EntityId, "not-a-ulid", "group")

        assert exc_info.value.status_code == status.HTTP_400_BAD_REQUEST
        assert exc_info.value.detail == "Invalid group ID format"
