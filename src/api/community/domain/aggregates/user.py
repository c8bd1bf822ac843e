"""User aggregate for the community context."""

from __future__ import annotations

from dataclasses import dataclass

from community.domain.exceptions import UnchangedStatusError
from community.domain.value_objects import AccountStatus, AuthorizationLevel, UserId
from shared_kernel.exceptions import ValidationError


@dataclass(eq=False)
class User:
    """User aggregate representing a registered person.

    The credential is stored only as a one-way hash. Users are never
    hard-deleted in the normal flow; admins change their status instead.
    """

    id: UserId
    login: str
    password_hash: str
    name: str
    email: str | None = None
    phone: str | None = None
    timezone: str | None = None
    authorization: AuthorizationLevel = AuthorizationLevel.STANDARD
    status: AccountStatus = AccountStatus.NORMAL
    is_mentor: bool = False

    @staticmethod
    def normalize_login(login: str) -> str:
        """Case-normalize a login so lookups and uniqueness are case-insensitive."""
        return login.strip().lower()

    @classmethod
    def register(
        cls,
        login: str,
        password_hash: str,
        name: str,
        email: str | None = None,
        phone: str | None = None,
        timezone: str | None = None,
    ) -> User:
        """Factory method for a newly registered user.

        Raises:
            ValidationError: If login or name is blank
        """
        normalized = cls.normalize_login(login or "")
        if not normalized:
            raise ValidationError("Login cannot be empty")
        if not name or not name.strip():
            raise ValidationError("Name cannot be empty")

        return cls(
            id=UserId.generate(),
            login=normalized,
            password_hash=password_hash,
            name=name.strip(),
            email=email or None,
            phone=phone or None,
            timezone=timezone or None,
        )

    def is_admin(self) -> bool:
        """Check whether the user holds the system-wide ADMIN level."""
        return self.authorization == AuthorizationLevel.ADMIN

    def can_act(self) -> bool:
        """Only accounts in NORMAL status may perform actions."""
        return self.status == AccountStatus.NORMAL

    def change_status(self, new_status: AccountStatus) -> None:
        """Change the account status.

        Raises:
            UnchangedStatusError: If the account already has this status
        """
        if self.status == new_status:
            raise UnchangedStatusError(f"User already has status {new_status.value}")
        self.status = new_status

    def edit_account(
        self,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> None:
        """Update contact details. Blank values leave the field unchanged."""
        if name and name.strip():
            self.name = name.strip()
        if email and email.strip():
            self.email = email.strip()
        if phone and phone.strip():
            self.phone = phone.strip()

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.login})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
