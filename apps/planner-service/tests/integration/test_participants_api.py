import uuid

import pytest

from planner.db import models
from planner.db.repositories import participants as participant_repo

pytestmark = pytest.mark.integration


def _guest(db_session, trip_id, email="guest1@example.com"):
    return participant_repo.get_participant_by_email(db_session, trip_id, email)


def test_list_participants_owner_first(client, trip_id):
    r = client.get(f"/trips/{trip_id}/participants")
    assert r.status_code == 200
    participants = r.json()["participants"]
    assert [p["email"] for p in participants] == [
        "owner@example.com",
        "guest1@example.com",
        "guest2@example.com",
    ]
    assert participants[0]["name"] == "Diego"
    assert participants[1]["name"] is None
    assert set(participants[0]) == {"id", "name", "email", "is_confirmed"}


def test_list_participants_unknown_trip(client):
    r = client.get(f"/trips/{uuid.uuid4()}/participants")
    assert r.status_code == 404
    assert r.json()["message"] == "Trip not found."


def test_invite_participant(client, db_session, trip_id, email_provider):
    email_provider.send_email.reset_mock()
    r = client.post(f"/trips/{trip_id}/invites", json={"email": "newbie@example.com"})
    assert r.status_code == 201, r.text
    participant_id = uuid.UUID(r.json()["participantId"])

    participant = db_session.get(models.Participant, participant_id)
    assert participant.email == "newbie@example.com"
    assert participant.is_confirmed is False

    kwargs = email_provider.send_email.await_args.kwargs
    assert kwargs["to_email"] == "newbie@example.com"
    assert f"/participants/{participant_id}/confirm" in kwargs["text_content"]


def test_invite_succeeds_with_unknown_email_provider(client, trip_id, monkeypatch):
    from planner.services import transactional_email_service
    monkeypatch.setenv("EMAIL_PROVIDER", "sendgrid")
    monkeypatch.setattr(transactional_email_service, "_email_service", None)
    r = client.post(f"/trips/{trip_id}/invites", json={"email": "late@example.com"})
    assert r.status_code == 201, r.text


def test_invite_duplicate_participant(client, trip_id):
    r = client.post(f"/trips/{trip_id}/invites", json={"email": "GUEST1@example.com"})
    assert r.status_code == 400
    assert r.json() == {"message": "Participant already invited."}


def test_invite_rejects_bad_email(client, trip_id):
    r = client.post(f"/trips/{trip_id}/invites", json={"email": "not-an-email"})
    assert r.status_code == 400
    assert "email" in r.json()["errors"]


def test_get_participant(client, db_session, trip_id):
    guest = _guest(db_session, trip_id)
    r = client.get(f"/participants/{guest.id}")
    assert r.status_code == 200
    assert r.json()["participant"] == {
        "id": str(guest.id),
        "name": None,
        "email": "guest1@example.com",
        "is_confirmed": False,
    }


def test_get_unknown_participant(client):
    r = client.get(f"/participants/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json() == {"message": "Participant not found."}


def test_malformed_participant_id_is_invalid_input(client):
    r = client.get("/participants/not-a-uuid")
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid input"


def test_confirm_participant_link_redirects(client, db_session, trip_id):
    guest = _guest(db_session, trip_id)
    r = client.get(f"/participants/{guest.id}/confirm", follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == f"http://localhost:3000/trips/{trip_id}"
    db_session.refresh(guest)
    assert guest.is_confirmed is True


def test_confirm_participant_with_name(client, db_session, trip_id):
    guest = _guest(db_session, trip_id)
    r = client.patch(
        f"/participants/{guest.id}/confirm",
        json={"name": "Mayk", "email": "Guest1@Example.com"},
    )
    assert r.status_code == 204
    db_session.refresh(guest)
    assert guest.name == "Mayk"
    assert guest.is_confirmed is True


def test_confirm_participant_with_wrong_email(client, db_session, trip_id):
    guest = _guest(db_session, trip_id)
    r = client.patch(
        f"/participants/{guest.id}/confirm",
        json={"name": "Mayk", "email": "someone.else@example.com"},
    )
    assert r.status_code == 400
    assert r.json() == {"message": "E-mail does not match the invitation."}
    db_session.refresh(guest)
    assert guest.is_confirmed is False
