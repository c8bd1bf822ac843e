"""SQLAlchemy implementation of IDialogueRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mentoring.domain.aggregates import Dialogue
from mentoring.domain.value_objects import DialogueId, MentorshipId, ParticipantId
from mentoring.infrastructure.models import DialogueModel
from mentoring.ports.repositories import IDialogueRepository


class DialogueRepository(IDialogueRepository):
    """Relational repository for mentorship messages. Messages are append-only."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, dialogue: Dialogue) -> None:
        self._session.add(
            DialogueModel(
                id=dialogue.id.value,
                mentorship_id=dialogue.mentorship_id.value,
                participant_id=dialogue.participant_id.value,
                message=dialogue.message,
                sent_at=dialogue.sent_at,
            )
        )
        await self._session.flush()

    async def list_by_mentorship(self, mentorship_id: MentorshipId) -> list[Dialogue]:
        stmt = (
            select(DialogueModel)
            .where(DialogueModel.mentorship_id == mentorship_id.value)
            .order_by(DialogueModel.sent_at, DialogueModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            Dialogue(
                id=DialogueId(value=model.id),
                mentorship_id=MentorshipId(value=model.mentorship_id),
                participant_id=ParticipantId(value=model.participant_id),
                message=model.message,
                sent_at=model.sent_at,
            )
            for model in result.scalars().all()
        ]
