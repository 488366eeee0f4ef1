import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc


class EmailNotificationLog(Base):
    __tablename__ = 'email_notification_logs'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    trip_id = Column(UUID(as_uuid=True), ForeignKey('trips.id', ondelete='CASCADE'), nullable=False)
    participant_id = Column(UUID(as_uuid=True), ForeignKey('participants.id', ondelete='SET NULL'), nullable=True)
    email_address = Column(String(320), nullable=False)
    event_type = Column(String(50), nullable=False)
    subject = Column(String(500), nullable=False)
    status = Column(String(20), nullable=False, default='pending')
    provider_message_id = Column(String(255), nullable=True)
    error_message = Column(Text, nullable=True)
    sent_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    __table_args__ = (
        Index('idx_email_notification_logs_trip_id_created_at', 'trip_id', 'created_at'),
        Index('idx_email_notification_logs_status', 'status'),
        Index('idx_email_notification_logs_event_type', 'event_type'),
    )
