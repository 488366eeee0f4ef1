"""
Notification service: trip confirmation and guest invitation emails.

Every dispatch writes an `EmailNotificationLog` row first and then moves it
to 'sent' or 'failed'. Delivery problems are logged and recorded, never
raised to the caller.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional, Dict, Any, List

from sqlalchemy.orm import Session

from planner.db import models
from planner.db.repositories import email_logs
from planner.utils.dates import format_day_of_month
from planner.utils.urls import build_participant_confirm_link, build_trip_confirm_link

logger = logging.getLogger(__name__)

EVENT_TRIP_CREATED = 'trip_created'
EVENT_PARTICIPANT_INVITED = 'participant_invited'

TEMPLATE_TRIP_CONFIRMATION = 'trip_confirmation'
TEMPLATE_TRIP_INVITATION = 'trip_invitation'


class NotificationService:
    """Sends trip emails and keeps the notification log current."""

    def __init__(self, db: Session, email_service: Optional[Any] = None):
        self.db = db
        if email_service is not None:
            self.email_service = email_service
        else:
            # resolved at call time so tests can patch the factory
            from planner.services import transactional_email_service
            try:
                self.email_service = transactional_email_service.get_transactional_email_service()
            except Exception as e:
                logger.error("Failed to initialize email service: %s", e)
                self.email_service = None

    def _trip_context(self, trip: models.Trip) -> Dict[str, Any]:
        return {
            'destination': trip.destination,
            'starts_at': format_day_of_month(trip.starts_at),
            'ends_at': format_day_of_month(trip.ends_at),
            'current_year': datetime.now().year,
        }

    async def send_email_notification(
        self,
        email_log: models.EmailNotificationLog,
        template_name: str,
        template_context: Dict[str, Any],
        to_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Render `template_name` and send it to the log's address.

        Returns:
            Dict with 'success', 'email_log_id' and 'message_id' or 'error'
        """
        if self.email_service is None:
            email_logs.update_email_status(
                self.db,
                email_log.id,
                email_logs.STATUS_FAILED,
                error_message='Email service unavailable',
            )
            return {'success': False, 'email_log_id': email_log.id, 'error': 'Email service unavailable'}

        try:
            html_content, text_content = self.email_service.render_template(
                template_name,
                template_context,
            )
            result = await self.email_service.send_email(
                to_email=email_log.email_address,
                subject=email_log.subject,
                html_content=html_content,
                text_content=text_content,
                to_name=to_name,
            )
        except Exception as e:
            logger.warning("Email dispatch to %s failed", email_log.email_address, exc_info=True)
            result = {'success': False, 'error': f"Failed to send email: {e}"}

        if result['success']:
            email_logs.update_email_status(
                self.db,
                email_log.id,
                email_logs.STATUS_SENT,
                provider_message_id=result.get('message_id'),
            )
            return {'success': True, 'email_log_id': email_log.id, 'message_id': result.get('message_id')}

        email_logs.update_email_status(
            self.db,
            email_log.id,
            email_logs.STATUS_FAILED,
            error_message=result.get('error') or 'Unknown error',
        )
        logger.warning("Email to %s marked failed: %s", email_log.email_address, result.get('error'))
        return {'success': False, 'email_log_id': email_log.id, 'error': result.get('error')}

    def _dispatch(self, email_log, template_name, template_context, to_name=None) -> Dict[str, Any]:
        return asyncio.run(
            self.send_email_notification(email_log, template_name, template_context, to_name=to_name)
        )

    def notify_trip_created(self, trip: models.Trip, owner: models.Participant) -> Dict[str, Any]:
        """Ask the owner to confirm a newly created trip."""
        subject = f"Confirm your trip to {trip.destination} on {format_day_of_month(trip.starts_at)}"
        email_log = email_logs.create_email_log(
            self.db,
            trip_id=trip.id,
            participant_id=owner.id,
            email_address=owner.email,
            event_type=EVENT_TRIP_CREATED,
            subject=subject,
        )
        context = self._trip_context(trip)
        context.update({
            'owner_name': owner.name,
            'confirmation_link': build_trip_confirm_link(trip.id),
        })
        return self._dispatch(email_log, TEMPLATE_TRIP_CONFIRMATION, context, to_name=owner.name)

    def notify_participant_invited(self, trip: models.Trip, participant: models.Participant) -> Dict[str, Any]:
        """Invite a guest to confirm their presence on the trip."""
        subject = f"Confirm your presence on the trip to {trip.destination} on {format_day_of_month(trip.starts_at)}"
        email_log = email_logs.create_email_log(
            self.db,
            trip_id=trip.id,
            participant_id=participant.id,
            email_address=participant.email,
            event_type=EVENT_PARTICIPANT_INVITED,
            subject=subject,
        )
        context = self._trip_context(trip)
        context['confirmation_link'] = build_participant_confirm_link(participant.id)
        return self._dispatch(email_log, TEMPLATE_TRIP_INVITATION, context)

    def notify_guests(self, trip: models.Trip, guests: List[models.Participant]) -> List[Dict[str, Any]]:
        return [self.notify_participant_invited(trip, guest) for guest in guests]
