"""
Participants API endpoints.

Guests are listed per trip, invited by email, and confirm their presence
either by following the emailed link or by submitting their name from the
app.
"""
import logging
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from planner.api.deps import get_notification_service, get_participant_or_404, get_trip_or_404
from planner.db import models, schemas
from planner.db.database import get_db
from planner.db.repositories import participants as participant_repo
from planner.errors import ClientError
from planner.services.notification_service import NotificationService
from planner.utils.urls import build_web_trip_link

logger = logging.getLogger(__name__)

router = APIRouter(tags=["participants"])


@router.get("/trips/{trip_id}/participants", response_model=schemas.ParticipantList)
def get_trip_participants_endpoint(
    db_trip: models.Trip = Depends(get_trip_or_404),
    db: Session = Depends(get_db),
):
    return {"participants": participant_repo.get_trip_participants(db, db_trip.id)}


@router.post(
    "/trips/{trip_id}/invites",
    response_model=schemas.ParticipantCreated,
    status_code=status.HTTP_201_CREATED,
)
def invite_participant_endpoint(
    invite: schemas.ParticipantInvite,
    db_trip: models.Trip = Depends(get_trip_or_404),
    db: Session = Depends(get_db),
    notifications: NotificationService = Depends(get_notification_service),
):
    if participant_repo.get_participant_by_email(db, db_trip.id, invite.email):
        raise ClientError("Participant already invited.")
    db_participant = participant_repo.create_participant(db, db_trip.id, invite.email)
    notifications.notify_participant_invited(db_trip, db_participant)
    return schemas.ParticipantCreated(participant_id=db_participant.id)


@router.get("/participants/{participant_id}", response_model=schemas.ParticipantResponse)
def get_participant_endpoint(db_participant: models.Participant = Depends(get_participant_or_404)):
    return {"participant": db_participant}


@router.get(
    "/participants/{participant_id}/confirm",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
)
def confirm_participant_link_endpoint(
    db_participant: models.Participant = Depends(get_participant_or_404),
    db: Session = Depends(get_db),
):
    if not db_participant.is_confirmed:
        participant_repo.confirm_participant(db, db_participant)
        logger.info("Participant %s confirmed via email link", db_participant.id)
    return RedirectResponse(build_web_trip_link(db_participant.trip_id), status_code=status.HTTP_302_FOUND)


@router.patch("/participants/{participant_id}/confirm", status_code=status.HTTP_204_NO_CONTENT)
def confirm_participant_endpoint(
    confirmation: schemas.ParticipantConfirm,
    db_participant: models.Participant = Depends(get_participant_or_404),
    db: Session = Depends(get_db),
):
    if confirmation.email.lower() != db_participant.email.lower():
        raise ClientError("E-mail does not match the invitation.")
    participant_repo.confirm_participant(db, db_participant, name=confirmation.name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
