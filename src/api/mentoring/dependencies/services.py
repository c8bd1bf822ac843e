"""Repository and service providers for the mentoring bounded context."""

from typing import Annotated

from fastapi import Depends

from community.dependencies.repositories import Session
from mentoring.application.services import EvaluationService, MentorshipService
from mentoring.infrastructure import (
    DialogueRepository,
    EvaluationRepository,
    MentorshipRepository,
    ParticipantRepository,
)


def get_mentorship_repository(session: Session) -> MentorshipRepository:
    return MentorshipRepository(session=session)


def get_participant_repository(session: Session) -> ParticipantRepository:
    return ParticipantRepository(session=session)


def get_dialogue_repository(session: Session) -> DialogueRepository:
    return DialogueRepository(session=session)


def get_evaluation_repository(session: Session) -> EvaluationRepository:
    return EvaluationRepository(session=session)


def get_mentorship_service(
    session: Session,
    mentorship_repo: Annotated[
        MentorshipRepository, Depends(get_mentorship_repository)
    ],
    participant_repo: Annotated[
        ParticipantRepository, Depends(get_participant_repository)
    ],
    dialogue_repo: Annotated[DialogueRepository, Depends(get_dialogue_repository)],
) -> MentorshipService:
    """Get MentorshipService instance."""
    return MentorshipService(
        session=session,
        mentorship_repository=mentorship_repo,
        participant_repository=participant_repo,
        dialogue_repository=dialogue_repo,
    )


def get_evaluation_service(
    session: Session,
    mentorship_repo: Annotated[
        MentorshipRepository, Depends(get_mentorship_repository)
    ],
    participant_repo: Annotated[
        ParticipantRepository, Depends(get_participant_repository)
    ],
    evaluation_repo: Annotated[
        EvaluationRepository, Depends(get_evaluation_repository)
    ],
) -> EvaluationService:
    """Get EvaluationService instance."""
    return EvaluationService(
        session=session,
        mentorship_repository=mentorship_repo,
        participant_repository=participant_repo,
        evaluation_repository=evaluation_repo,
    )
