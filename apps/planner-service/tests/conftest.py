import os
import uuid
from datetime import datetime, timedelta, UTC
from unittest.mock import AsyncMock, MagicMock

import pytest

# Keep the app on its in-memory SQLite engine regardless of the caller's shell
os.environ.pop("DATABASE_URL", None)
os.environ["PYTEST_RUNNING"] = "1"

from fastapi.testclient import TestClient

import planner.db.database as db_module
from planner.api.main import app
from planner.db import models
from planner.services import transactional_email_service


# Per-test schema on the shared in-memory engine
@pytest.fixture(autouse=True)
def db_session():
    models.Base.metadata.create_all(bind=db_module.engine)
    session = db_module.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        models.Base.metadata.drop_all(bind=db_module.engine)


@pytest.fixture
def db(db_session):
    return db_session


# Email delivery is replaced by a recording provider; templates still render
@pytest.fixture(autouse=True)
def email_provider(monkeypatch):
    for var in ("EMAIL_PROVIDER", "EMAIL_TEMPLATE_DIR", "FROM_EMAIL", "FROM_NAME"):
        monkeypatch.delenv(var, raising=False)
    service = transactional_email_service.TransactionalEmailService()
    provider = MagicMock()
    provider.send_email = AsyncMock(
        return_value={'success': True, 'provider': 'smtp', 'message_id': '<test@plann.er>'}
    )
    service.provider_service = provider
    monkeypatch.setattr(transactional_email_service, "_email_service", service)
    return provider


@pytest.fixture
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[db_module.get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(db_module.get_db, None)


@pytest.fixture
def trip_payload():
    """A valid POST /trips body starting tomorrow."""
    start = datetime.now(UTC).replace(hour=10, minute=0, second=0, microsecond=0) + timedelta(days=1)
    return {
        "destination": "Florianópolis, SC",
        "starts_at": start.isoformat(),
        "ends_at": (start + timedelta(days=4)).isoformat(),
        "emails_to_invite": ["guest1@example.com", "guest2@example.com"],
        "owner_name": "Diego",
        "owner_email": "owner@example.com",
    }


@pytest.fixture
def trip_id(client, trip_payload):
    r = client.post("/trips", json=trip_payload)
    assert r.status_code == 201, r.text
    return uuid.UUID(r.json()["tripId"])
