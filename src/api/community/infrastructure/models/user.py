"""SQLAlchemy ORM models for the users and profiles tables."""

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class UserModel(Base, TimestampMixin):
    """ORM model for the users table.

    ``login`` is stored case-normalized and is unique. The password column
    holds a bcrypt hash, never plaintext.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    login: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    timezone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    authorization: Mapped[str] = mapped_column(
        String(20), nullable=False, default="standard"
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="normal")
    is_mentor: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<UserModel(id={self.id}, login={self.login})>"


class ProfileModel(Base, TimestampMixin):
    """ORM model for the profiles table (1:1 with users)."""

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ProfileModel(id={self.id}, user_id={self.user_id})>"
