"""ORM models for mentorships, participants, dialogues and evaluations."""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class MentorshipModel(Base, TimestampMixin):
    """ORM model for the mentorships table."""

    __tablename__ = "mentorships"
    __table_args__ = (CheckConstraint("starts_at < ends_at", name="schedule"),)

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    starts_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    ends_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<MentorshipModel(id={self.id}, status={self.status})>"


class ParticipantModel(Base):
    """ORM model for the mentorship_participants table.

    A user takes part in a given mentorship at most once.
    """

    __tablename__ = "mentorship_participants"
    __table_args__ = (
        UniqueConstraint(
            "mentorship_id", "user_id", name="uq_mentorship_participants_user"
        ),
    )

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    mentorship_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("mentorships.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ParticipantModel(mentorship_id={self.mentorship_id}, role={self.role})>"


class DialogueModel(Base):
    """ORM model for the mentorship_dialogues table."""

    __tablename__ = "mentorship_dialogues"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    mentorship_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("mentorships.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    participant_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("mentorship_participants.id", ondelete="CASCADE"),
        nullable=False,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    sent_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class EvaluationModel(Base):
    """ORM model for the mentorship_evaluations table."""

    __tablename__ = "mentorship_evaluations"
    __table_args__ = (
        UniqueConstraint(
            "mentorship_id", "user_id", name="uq_mentorship_evaluations_user"
        ),
        CheckConstraint("score >= 0 AND score <= 5", name="score_range"),
    )

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    mentorship_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("mentorships.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(26), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
