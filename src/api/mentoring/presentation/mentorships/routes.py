"""HTTP routes for mentorships."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from community.application.value_objects import CurrentUser
from community.dependencies.authentication import get_current_user
from mentoring.application.services import EvaluationService, MentorshipService
from mentoring.dependencies.services import (
    get_evaluation_service,
    get_mentorship_service,
)
from mentoring.domain.value_objects import MentorshipId, MentorshipStatus
from mentoring.presentation.mentorships.models import (
    EvaluationResponse,
    EvaluationSummaryResponse,
    MentorshipResponse,
    MessageResponse,
    OfferMentorshipRequest,
    ParticipantResponse,
    RescheduleMentorshipRequest,
    SendMessageRequest,
    SubmitEvaluationRequest,
)
from shared_kernel.exceptions import DomainError
from shared_kernel.http_errors import parse_identifier, to_http_exception

router = APIRouter(prefix="/mentorships", tags=["mentorships"])

Service = Annotated[MentorshipService, Depends(get_mentorship_service)]
Actor = Annotated[CurrentUser, Depends(get_current_user)]


@router.get("")
async def list_mentorships(
    current_user: Actor,
    service: Service,
    status_filter: Annotated[MentorshipStatus | None, Query(alias="status")] = None,
    name: str | None = None,
    starts_after: datetime | None = None,
) -> list[MentorshipResponse]:
    """List mentorships ordered by start time.

    Filter by status, by a case-insensitive name fragment or by start date.
    """
    try:
        mentorships = await service.list_mentorships(
            status=status_filter, name=name, starts_after=starts_after
        )
        return [MentorshipResponse.from_domain(m) for m in mentorships]

    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list mentorships",
        )


@router.get("/mine")
async def list_my_mentorships(
    current_user: Actor, service: Service
) -> list[MentorshipResponse]:
    """List the mentorships the authenticated user takes part in."""
    try:
        mentorships = await service.list_for_user(current_user)
        return [MentorshipResponse.from_domain(m) for m in mentorships]

    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list mentorships",
        )


@router.post("", status_code=status.HTTP_201_CREATED)
async def offer_mentorship(
    request: OfferMentorshipRequest, current_user: Actor, service: Service
) -> MentorshipResponse:
    """Offer a new mentorship. Only mentor-eligible users may do this."""
    try:
        mentorship = await service.offer(
            name=request.name,
            starts_at=request.starts_at,
            ends_at=request.ends_at,
            mentor=current_user,
        )
        return MentorshipResponse.from_domain(mentorship)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to offer mentorship",
        )


@router.get("/{mentorship_id}")
async def get_mentorship(
    mentorship_id: str, current_user: Actor, service: Service
) -> MentorshipResponse:
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        mentorship = await service.get_mentorship(mentorship_id_obj)
        return MentorshipResponse.from_domain(mentorship)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get mentorship",
        )


@router.patch("/{mentorship_id}")
async def reschedule_mentorship(
    mentorship_id: str,
    request: RescheduleMentorshipRequest,
    current_user: Actor,
    service: Service,
) -> MentorshipResponse:
    """Change the name or schedule of a mentorship (mentor only)."""
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        mentorship = await service.reschedule(
            mentorship_id_obj,
            current_user,
            name=request.name,
            starts_at=request.starts_at,
            ends_at=request.ends_at,
        )
        return MentorshipResponse.from_domain(mentorship)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update mentorship",
        )


@router.post("/{mentorship_id}/request")
async def request_mentorship(
    mentorship_id: str, current_user: Actor, service: Service
) -> MentorshipResponse:
    """Join a mentorship as a mentee."""
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        mentorship = await service.request(mentorship_id_obj, current_user)
        return MentorshipResponse.from_domain(mentorship)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to request mentorship",
        )


@router.post("/{mentorship_id}/finalize")
async def finalize_mentorship(
    mentorship_id: str, current_user: Actor, service: Service
) -> MentorshipResponse:
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        mentorship = await service.finalize(mentorship_id_obj, current_user)
        return MentorshipResponse.from_domain(mentorship)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to finalize mentorship",
        )


@router.post("/{mentorship_id}/cancel")
async def cancel_mentorship(
    mentorship_id: str, current_user: Actor, service: Service
) -> MentorshipResponse:
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        mentorship = await service.cancel(mentorship_id_obj, current_user)
        return MentorshipResponse.from_domain(mentorship)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to cancel mentorship",
        )


@router.get("/{mentorship_id}/participants")
async def list_participants(
    mentorship_id: str, current_user: Actor, service: Service
) -> list[ParticipantResponse]:
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        participants = await service.list_participants(mentorship_id_obj)
        return [ParticipantResponse.from_domain(p) for p in participants]

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list participants",
        )


@router.get("/{mentorship_id}/messages")
async def list_messages(
    mentorship_id: str, current_user: Actor, service: Service
) -> list[MessageResponse]:
    """Read the mentorship dialogue (participants only)."""
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        messages = await service.list_messages(mentorship_id_obj, current_user)
        return [MessageResponse.from_domain(m) for m in messages]

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list messages",
        )


@router.post("/{mentorship_id}/messages", status_code=status.HTTP_201_CREATED)
async def send_message(
    mentorship_id: str,
    request: SendMessageRequest,
    current_user: Actor,
    service: Service,
) -> MessageResponse:
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        dialogue = await service.send_message(
            mentorship_id_obj, request.message, current_user
        )
        return MessageResponse.from_domain(dialogue)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send message",
        )


@router.get("/{mentorship_id}/evaluations")
async def list_evaluations(
    mentorship_id: str,
    current_user: Actor,
    service: Annotated[EvaluationService, Depends(get_evaluation_service)],
) -> EvaluationSummaryResponse:
    """List a mentorship's evaluations and their average score."""
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        summary = await service.summarize(mentorship_id_obj)
        return EvaluationSummaryResponse.from_domain(summary)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list evaluations",
        )


@router.post("/{mentorship_id}/evaluations", status_code=status.HTTP_201_CREATED)
async def submit_evaluation(
    mentorship_id: str,
    request: SubmitEvaluationRequest,
    current_user: Actor,
    service: Annotated[EvaluationService, Depends(get_evaluation_service)],
) -> EvaluationResponse:
    """Score a concluded mentorship (participants only, once each)."""
    mentorship_id_obj = parse_identifier(MentorshipId, mentorship_id, "mentorship")

    try:
        evaluation = await service.submit(
            mentorship_id_obj, request.score, current_user
        )
        return EvaluationResponse.from_domain(evaluation)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit evaluation",
        )
