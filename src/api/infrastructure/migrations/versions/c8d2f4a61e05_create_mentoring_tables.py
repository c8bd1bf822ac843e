"""create mentoring tables

Mentorships with their participants, dialogue messages and evaluations.

Revision ID: c8d2f4a61e05
Revises: a3c1e7f09b42
Create Date: 2026-10-14 16:02:51.530917

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "c8d2f4a61e05"
down_revision: Union[str, Sequence[str], None] = "a3c1e7f09b42"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "mentorships",
        sa.Column("id", sa.String(length=26), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("starts_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ends_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "starts_at < ends_at", name=op.f("ck_mentorships_schedule")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_mentorships")),
    )
    op.create_index(op.f("ix_mentorships_name"), "mentorships", ["name"])
    op.create_index(op.f("ix_mentorships_starts_at"), "mentorships", ["starts_at"])
    op.create_index(op.f("ix_mentorships_status"), "mentorships", ["status"])

    op.create_table(
        "mentorship_participants",
        sa.Column("id", sa.String(length=26), nullable=False),
        sa.Column("mentorship_id", sa.String(length=26), nullable=False),
        sa.Column("user_id", sa.String(length=26), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(
            ["mentorship_id"],
            ["mentorships.id"],
            name=op.f("fk_mentorship_participants_mentorship_id_mentorships"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name=op.f("fk_mentorship_participants_user_id_users"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_mentorship_participants")),
        sa.UniqueConstraint(
            "mentorship_id",
            "user_id",
            name=op.f("uq_mentorship_participants_user"),
        ),
    )
    op.create_index(
        op.f("ix_mentorship_participants_mentorship_id"),
        "mentorship_participants",
        ["mentorship_id"],
    )
    op.create_index(
        op.f("ix_mentorship_participants_user_id"),
        "mentorship_participants",
        ["user_id"],
    )

    op.create_table(
        "mentorship_dialogues",
        sa.Column("id", sa.String(length=26), nullable=False),
        sa.Column("mentorship_id", sa.String(length=26), nullable=False),
        sa.Column("participant_id", sa.String(length=26), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["mentorship_id"],
            ["mentorships.id"],
            name=op.f("fk_mentorship_dialogues_mentorship_id_mentorships"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["participant_id"],
            ["mentorship_participants.id"],
            name=op.f("fk_mentorship_dialogues_participant_id_mentorship_participants"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_mentorship_dialogues")),
    )
    op.create_index(
        op.f("ix_mentorship_dialogues_mentorship_id"),
        "mentorship_dialogues",
        ["mentorship_id"],
    )

    op.create_table(
        "mentorship_evaluations",
        sa.Column("id", sa.String(length=26), nullable=False),
        sa.Column("mentorship_id", sa.String(length=26), nullable=False),
        sa.Column("user_id", sa.String(length=26), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "score >= 0 AND score <= 5",
            name=op.f("ck_mentorship_evaluations_score_range"),
        ),
        sa.ForeignKeyConstraint(
            ["mentorship_id"],
            ["mentorships.id"],
            name=op.f("fk_mentorship_evaluations_mentorship_id_mentorships"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name=op.f("fk_mentorship_evaluations_user_id_users"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_mentorship_evaluations")),
        sa.UniqueConstraint(
            "mentorship_id",
            "user_id",
            name=op.f("uq_mentorship_evaluations_user"),
        ),
    )
    op.create_index(
        op.f("ix_mentorship_evaluations_mentorship_id"),
        "mentorship_evaluations",
        ["mentorship_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("mentorship_evaluations")
    op.drop_table("mentorship_dialogues")
    op.drop_table("mentorship_participants")
    op.drop_table("mentorships")
