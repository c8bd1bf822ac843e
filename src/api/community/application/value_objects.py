"""Application-layer value objects for the community bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from community.domain.aggregates import User
from community.domain.value_objects import AuthorizationLevel, UserId


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated actor of the current request.

    Resolved from the bearer token and the user's stored account on every
    request, so it always reflects the current authorization level and
    mentor eligibility. This is an application-layer concept because it
    represents the request's authentication context, not a business entity.
    """

    user_id: UserId
    login: str
    name: str
    authorization: AuthorizationLevel = AuthorizationLevel.STANDARD
    is_mentor: bool = False

    @classmethod
    def from_user(cls, user: User) -> CurrentUser:
        return cls(
            user_id=user.id,
            login=user.login,
            name=user.name,
            authorization=user.authorization,
            is_mentor=user.is_mentor,
        )

    @property
    def is_admin(self) -> bool:
        return self.authorization == AuthorizationLevel.ADMIN
