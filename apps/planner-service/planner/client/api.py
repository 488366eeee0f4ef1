"""
HTTP client for the plann.er API.

Thin wrapper over a `requests.Session`; responses are parsed into small
dataclasses and any non-2xx answer raises `PlannerAPIError` carrying the
server's ``message``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

import requests

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = (3, 30)


class PlannerAPIError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


@dataclass
class TripDetails:
    id: str
    destination: str
    starts_at: datetime
    ends_at: datetime
    is_confirmed: bool

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "TripDetails":
        return cls(
            id=data["id"],
            destination=data["destination"],
            starts_at=datetime.fromisoformat(data["starts_at"]),
            ends_at=datetime.fromisoformat(data["ends_at"]),
            is_confirmed=data["is_confirmed"],
        )


@dataclass
class Participant:
    id: str
    email: str
    is_confirmed: bool
    name: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Participant":
        return cls(
            id=data["id"],
            email=data["email"],
            is_confirmed=data["is_confirmed"],
            name=data.get("name"),
        )


@dataclass
class Activity:
    id: str
    title: str
    occurs_at: datetime

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Activity":
        return cls(id=data["id"], title=data["title"], occurs_at=datetime.fromisoformat(data["occurs_at"]))


@dataclass
class DayActivities:
    date: date
    activities: List[Activity] = field(default_factory=list)


@dataclass
class Link:
    id: str
    title: str
    url: str


def _isoformat(value: datetime | date) -> str:
    return value.isoformat()


class PlannerClient:
    """Client for the trip, participant, activity and link endpoints."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout=_DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        response = self.session.request(method, f"{self.base_url}{path}", json=json, timeout=self.timeout)
        if not 200 <= response.status_code < 300:
            try:
                message = response.json().get("message") or response.reason
            except ValueError:
                message = response.text or response.reason
            logger.warning("%s %s failed: %s %s", method, path, response.status_code, message)
            raise PlannerAPIError(response.status_code, message)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # trips

    def create_trip(
        self,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
        emails_to_invite: Sequence[str],
        owner_name: str,
        owner_email: str,
    ) -> str:
        data = self._request("POST", "/trips", json={
            "destination": destination,
            "starts_at": _isoformat(starts_at),
            "ends_at": _isoformat(ends_at),
            "emails_to_invite": list(emails_to_invite),
            "owner_name": owner_name,
            "owner_email": owner_email,
        })
        return data["tripId"]

    def get_trip(self, trip_id: str) -> TripDetails:
        return TripDetails.from_json(self._request("GET", f"/trips/{trip_id}")["trip"])

    def update_trip(self, trip_id: str, destination: str, starts_at: datetime, ends_at: datetime) -> str:
        data = self._request("PUT", f"/trips/{trip_id}", json={
            "destination": destination,
            "starts_at": _isoformat(starts_at),
            "ends_at": _isoformat(ends_at),
        })
        return data["tripId"]

    # participants

    def get_participants(self, trip_id: str) -> List[Participant]:
        data = self._request("GET", f"/trips/{trip_id}/participants")
        return [Participant.from_json(p) for p in data["participants"]]

    def invite_participant(self, trip_id: str, email: str) -> str:
        return self._request("POST", f"/trips/{trip_id}/invites", json={"email": email})["participantId"]

    def get_participant(self, participant_id: str) -> Participant:
        return Participant.from_json(self._request("GET", f"/participants/{participant_id}")["participant"])

    def confirm_participant(self, participant_id: str, name: str, email: str) -> None:
        self._request("PATCH", f"/participants/{participant_id}/confirm", json={"name": name, "email": email})

    # activities

    def create_activity(self, trip_id: str, title: str, occurs_at: datetime) -> str:
        data = self._request("POST", f"/trips/{trip_id}/activities", json={
            "title": title,
            "occurs_at": _isoformat(occurs_at),
        })
        return data["activityId"]

    def get_activities(self, trip_id: str) -> List[DayActivities]:
        data = self._request("GET", f"/trips/{trip_id}/activities")
        return [
            DayActivities(
                date=date.fromisoformat(day["date"]),
                activities=[Activity.from_json(a) for a in day["activities"]],
            )
            for day in data["activities"]
        ]

    # links

    def create_link(self, trip_id: str, title: str, url: str) -> str:
        return self._request("POST", f"/trips/{trip_id}/links", json={"title": title, "url": url})["linkId"]

    def get_links(self, trip_id: str) -> List[Link]:
        data = self._request("GET", f"/trips/{trip_id}/links")
        return [Link(id=l["id"], title=l["title"], url=l["url"]) for l in data["links"]]
