"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from community.application.value_objects import CurrentUser
from community.domain.value_objects import AuthorizationLevel, UserId


@pytest.fixture
def mock_session():
    """Create mock async session with transaction support."""
    session = AsyncMock()
    # Mock transaction context manager properly
    mock_transaction = MagicMock()
    mock_transaction.__aenter__ = AsyncMock(return_value=None)
    mock_transaction.__aexit__ = AsyncMock(return_value=None)
    session.begin = MagicMock(return_value=mock_transaction)
    return session


@pytest.fixture
def alice() -> CurrentUser:
    """A regular, non-mentor user."""
    return CurrentUser(user_id=UserId.generate(), login="alice", name="Alice")


@pytest.fixture
def bob() -> CurrentUser:
    return CurrentUser(user_id=UserId.generate(), login="bob", name="Bob")


@pytest.fixture
def admin() -> CurrentUser:
    return CurrentUser(
        user_id=UserId.generate(),
        login="root",
        name="Admin",
        authorization=AuthorizationLevel.ADMIN,
    )


@pytest.fixture
def mentor() -> CurrentUser:
    return CurrentUser(
        user_id=UserId.generate(), login="grace", name="Grace", is_mentor=True
    )
