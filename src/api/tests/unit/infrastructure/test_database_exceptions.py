"""Unit tests for unique-constraint detection on IntegrityError."""

from sqlalchemy.exc import IntegrityError

from infrastructure.database.exceptions import violates_unique_constraint


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


def test_postgres_constraint_name_matches():
    error = _integrity_error(
        'duplicate key value violates unique constraint "uq_users_login"'
    )
    assert violates_unique_constraint(error, "uq_users_login", "users.login")


def test_sqlite_column_form_matches():
    error = _integrity_error("UNIQUE constraint failed: users.login")
    assert violates_unique_constraint(error, "uq_users_login", "users.login")


def test_other_unique_constraint_does_not_match():
    error = _integrity_error("UNIQUE constraint failed: memberships.group_id")
    assert not violates_unique_constraint(error, "uq_users_login", "users.login")


def test_non_unique_failure_does_not_match():
    error = _integrity_error("FOREIGN KEY constraint failed: users.login")
    assert not violates_unique_constraint(error, "users.login")
