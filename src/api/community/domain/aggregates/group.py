"""Group aggregate for the community context."""

from __future__ import annotations

from dataclasses import dataclass, field

from community.domain.exceptions import InvalidGroupNameError
from community.domain.value_objects import GroupId

MAX_GROUP_NAME_LENGTH = 255


@dataclass
class Group:
    """Group aggregate: a space where members post and comment.

    Memberships and posts are separate aggregates that reference the group by
    id; the group itself only holds its own metadata.

    Business rules:
    - Names are 1-255 characters after trimming
    - A new group is active (open to new members)
    - Exactly one OWNER membership is created together with the group
      (enforced by the group service, which owns the transaction)
    """

    id: GroupId
    name: str
    description: str = ""
    active: bool = True
    member_count: int = field(default=0, compare=False)

    @classmethod
    def create(cls, name: str, description: str | None = None) -> Group:
        """Factory method for creating a new group.

        Args:
            name: The name of the group
            description: Optional free-text description

        Returns:
            A new, active Group

        Raises:
            InvalidGroupNameError: If the name is blank or too long
        """
        return cls(
            id=GroupId.generate(),
            name=cls._validated_name(name),
            description=(description or "").strip(),
            active=True,
        )

    @staticmethod
    def _validated_name(name: str | None) -> str:
        cleaned = (name or "").strip()
        if not cleaned or len(cleaned) > MAX_GROUP_NAME_LENGTH:
            raise InvalidGroupNameError(
                f"Group name must be between 1 and {MAX_GROUP_NAME_LENGTH} characters"
            )
        return cleaned

    def rename(self, new_name: str) -> None:
        """Rename the group.

        Raises:
            InvalidGroupNameError: If name is blank or too long
        """
        self.name = self._validated_name(new_name)

    def change_description(self, description: str | None) -> None:
        """Replace the description (None clears it)."""
        self.description = (description or "").strip()

    def set_active(self, is_open: bool) -> None:
        """Open or close the group to new members."""
        self.active = is_open

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = query.strip().lower()
        if not needle:
            return True
        return needle in self.name.lower() or needle in self.description.lower()
