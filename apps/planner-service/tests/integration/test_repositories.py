import uuid
from datetime import datetime, timedelta, UTC

import pytest
from sqlalchemy.exc import IntegrityError

from planner.db import models, schemas
from planner.db.repositories import activities as activity_repo
from planner.db.repositories import email_logs
from planner.db.repositories import links as link_repo
from planner.db.repositories import participants as participant_repo
from planner.db.repositories import trips as trip_repo

pytestmark = pytest.mark.integration


def _make_trip(db, **overrides):
    start = datetime.now(UTC) + timedelta(days=2)
    data = {
        "destination": "Buenos Aires",
        "starts_at": start,
        "ends_at": start + timedelta(days=3),
        "emails_to_invite": ["ana@example.com"],
        "owner_name": "Owner",
        "owner_email": "owner@example.com",
    }
    data.update(overrides)
    return trip_repo.create_trip(db, schemas.TripCreate(**data))


def test_unique_invites_keeps_first_spelling():
    assert trip_repo._unique_invites(
        ["B@x.io", "b@x.io", "me@x.io", "c@x.io"], "ME@x.io"
    ) == ["B@x.io", "c@x.io"]


def test_create_trip_owner_and_guests(db):
    trip = _make_trip(db)
    assert len(trip.participants) == 2
    assert [p.email for p in participant_repo.get_guests(db, trip.id)] == ["ana@example.com"]


def test_update_trip_missing_returns_none(db):
    start = datetime.now(UTC)
    update = schemas.TripUpdate(destination="Nowhere", starts_at=start, ends_at=start)
    assert trip_repo.update_trip(db, uuid.uuid4(), update) is None


def test_confirm_trip(db):
    trip = trip_repo.confirm_trip(db, _make_trip(db))
    assert trip.is_confirmed is True


def test_duplicate_participant_violates_unique_index(db):
    trip = _make_trip(db)
    with pytest.raises(IntegrityError):
        participant_repo.create_participant(db, trip.id, "ana@example.com")
    # session is usable after the rollback
    assert participant_repo.get_participant_by_email(db, trip.id, "ANA@example.com") is not None


def test_confirm_participant_keeps_name_when_not_given(db):
    trip = _make_trip(db)
    guest = participant_repo.get_guests(db, trip.id)[0]
    guest = participant_repo.confirm_participant(db, guest, name="Ana")
    guest = participant_repo.confirm_participant(db, guest)
    assert guest.name == "Ana"
    assert guest.is_confirmed is True


def test_activities_ordered_by_time(db):
    trip = _make_trip(db)
    late = schemas.ActivityCreate(title="Late", occurs_at=trip.starts_at + timedelta(hours=5))
    early = schemas.ActivityCreate(title="Early", occurs_at=trip.starts_at + timedelta(hours=1))
    activity_repo.create_activity(db, trip.id, late)
    activity_repo.create_activity(db, trip.id, early)
    assert [a.title for a in activity_repo.get_trip_activities(db, trip.id)] == ["Early", "Late"]


def test_links_ordered_by_title(db):
    trip = _make_trip(db)
    link_repo.create_link(db, trip.id, schemas.LinkCreate(title="Zoo tickets", url="https://zoo.example.com"))
    link_repo.create_link(db, trip.id, schemas.LinkCreate(title="Airbnb", url="https://airbnb.com/x"))
    assert [l.title for l in link_repo.get_trip_links(db, trip.id)] == ["Airbnb", "Zoo tickets"]


def test_email_log_lifecycle(db):
    trip = _make_trip(db)
    log = email_logs.create_email_log(
        db,
        trip_id=trip.id,
        email_address="owner@example.com",
        event_type="trip_created",
        subject="Confirm your trip",
    )
    assert log.status == email_logs.STATUS_PENDING
    assert email_logs.update_email_status(db, log.id, email_logs.STATUS_SENT, provider_message_id="m-1")
    db.refresh(log)
    assert log.status == email_logs.STATUS_SENT
    assert log.provider_message_id == "m-1"
    assert log.sent_at is not None


def test_update_missing_email_log(db):
    assert email_logs.update_email_status(db, uuid.uuid4(), email_logs.STATUS_FAILED) is False


def test_deleting_trip_cascades(db):
    trip = _make_trip(db)
    activity_repo.create_activity(db, trip.id, schemas.ActivityCreate(title="A", occurs_at=trip.starts_at))
    db.delete(trip)
    db.commit()
    assert db.query(models.Participant).count() == 0
    assert db.query(models.Activity).count() == 0
