"""
Email notification log repository.

One row per dispatch attempt; status moves from 'pending' to 'sent' or
'failed'.
"""
from __future__ import annotations

import uuid
from datetime import datetime, UTC
from typing import List, Optional
from sqlalchemy.orm import Session

from planner.db import models

STATUS_PENDING = 'pending'
STATUS_SENT = 'sent'
STATUS_FAILED = 'failed'


def create_email_log(
    db: Session,
    *,
    trip_id: uuid.UUID,
    email_address: str,
    event_type: str,
    subject: str,
    participant_id: Optional[uuid.UUID] = None,
) -> models.EmailNotificationLog:
    email_log = models.EmailNotificationLog(
        trip_id=trip_id,
        participant_id=participant_id,
        email_address=email_address,
        event_type=event_type,
        subject=subject,
        status=STATUS_PENDING,
    )
    db.add(email_log)
    db.commit()
    db.refresh(email_log)
    return email_log


def update_email_status(
    db: Session,
    email_log_id: uuid.UUID,
    status: str,
    *,
    provider_message_id: Optional[str] = None,
    error_message: Optional[str] = None,
) -> bool:
    """Returns False when the log row does not exist."""
    email_log = db.query(models.EmailNotificationLog).filter(
        models.EmailNotificationLog.id == email_log_id
    ).first()
    if not email_log:
        return False

    email_log.status = status
    if provider_message_id:
        email_log.provider_message_id = provider_message_id
    if error_message:
        email_log.error_message = error_message
    if status == STATUS_SENT:
        email_log.sent_at = datetime.now(UTC)

    db.commit()
    return True


def get_trip_email_logs(db: Session, trip_id: uuid.UUID) -> List[models.EmailNotificationLog]:
    return (
        db.query(models.EmailNotificationLog)
        .filter(models.EmailNotificationLog.trip_id == trip_id)
        .order_by(models.EmailNotificationLog.created_at.asc())
        .all()
    )
