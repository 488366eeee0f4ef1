import uuid
from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Trip(Base):
    __tablename__ = 'trips'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    destination = Column(String(255), nullable=False)
    starts_at = Column(DateTime(timezone=True), nullable=False)
    ends_at = Column(DateTime(timezone=True), nullable=False)
    is_confirmed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    participants = relationship(
        "Participant", back_populates="trip", cascade="all, delete-orphan", passive_deletes=True
    )
    activities = relationship(
        "Activity",
        back_populates="trip",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Activity.occurs_at",
    )
    links = relationship(
        "Link", back_populates="trip", cascade="all, delete-orphan", passive_deletes=True
    )


class Participant(Base):
    __tablename__ = 'participants'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    trip_id = Column(UUID(as_uuid=True), ForeignKey('trips.id', ondelete='CASCADE'), nullable=False)
    name = Column(String(255), nullable=True)
    email = Column(String(320), nullable=False)
    is_confirmed = Column(Boolean, nullable=False, default=False)
    is_owner = Column(Boolean, nullable=False, default=False)

    trip = relationship("Trip", back_populates="participants")

    __table_args__ = (
        Index('idx_participants_trip_id', 'trip_id'),
        Index('idx_participants_trip_id_email', 'trip_id', 'email', unique=True),
    )


class Activity(Base):
    __tablename__ = 'activities'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    trip_id = Column(UUID(as_uuid=True), ForeignKey('trips.id', ondelete='CASCADE'), nullable=False)
    title = Column(String(255), nullable=False)
    occurs_at = Column(DateTime(timezone=True), nullable=False)

    trip = relationship("Trip", back_populates="activities")

    __table_args__ = (
        Index('idx_activities_trip_id_occurs_at', 'trip_id', 'occurs_at'),
    )


class Link(Base):
    __tablename__ = 'links'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    trip_id = Column(UUID(as_uuid=True), ForeignKey('trips.id', ondelete='CASCADE'), nullable=False)
    title = Column(String(255), nullable=False)
    url = Column(Text, nullable=False)

    trip = relationship("Trip", back_populates="links")

    __table_args__ = (
        Index('idx_links_trip_id', 'trip_id'),
    )
