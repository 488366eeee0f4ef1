"""
Form validation for the trip screens.

Each form's `validate` either returns the request payload or raises
`FormValidationError` with the alert title and message shown to the user.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_type, datetime, timedelta
from typing import Optional

from planner.client.validation import is_valid_email, is_valid_url
from planner.utils.dates import today_utc


class FormValidationError(ValueError):
    def __init__(self, title: str, message: str):
        super().__init__(f"{title}: {message}")
        self.title = title
        self.message = message


def clean_hour(text: str) -> str:
    """Keep what the hour field accepts: no separators, at most two characters."""
    return text.replace(".", "").replace(",", "")[:2]


@dataclass
class ActivityForm:
    trip_ends_at: date_type
    title: str = ""
    date: Optional[date_type] = None
    hour: str = ""

    def set_hour(self, text: str) -> None:
        self.hour = clean_hour(text)

    def validate(self, today: Optional[date_type] = None) -> dict:
        """Returns ``{title, occurs_at}`` ready for the API."""
        if not self.title.strip() or self.date is None or not self.hour.strip():
            raise FormValidationError("Register activity", "Fill in all fields")
        if not self.hour.isdigit() or not 0 <= int(self.hour) <= 23:
            raise FormValidationError("Register activity", "Enter an hour between 0 and 23")
        today = today or today_utc()
        if not today <= self.date <= self.trip_ends_at:
            raise FormValidationError("Register activity", "Choose a date within the trip")
        occurs_at = datetime.combine(self.date, datetime.min.time()) + timedelta(hours=int(self.hour))
        return {"title": self.title.strip(), "occurs_at": occurs_at}


@dataclass
class LinkForm:
    title: str = ""
    url: str = ""

    def validate(self) -> dict:
        if not self.title.strip():
            raise FormValidationError("Link", "Enter a title for the link!")
        if not is_valid_url(self.url.strip()):
            raise FormValidationError("Link", "Invalid link!")
        return {"title": self.title.strip(), "url": self.url.strip()}


@dataclass
class GuestConfirmationForm:
    name: str = ""
    email: str = ""

    def validate(self) -> dict:
        if not self.name.strip() or not self.email.strip():
            raise FormValidationError("Confirmation", "Fill in your name and e-mail to confirm the trip!")
        if not is_valid_email(self.email.strip()):
            raise FormValidationError("Confirmation", "Invalid e-mail!")
        return {"name": self.name.strip(), "email": self.email.strip()}


@dataclass
class TripUpdateForm:
    destination: str = ""
    starts_at: Optional[date_type] = None
    ends_at: Optional[date_type] = None

    def validate(self) -> dict:
        if not self.destination.strip() or self.starts_at is None or self.ends_at is None:
            raise FormValidationError("Update trip", "Remember to fill in the destination and trip dates.")
        return {
            "destination": self.destination.strip(),
            "starts_at": datetime.combine(self.starts_at, datetime.min.time()),
            "ends_at": datetime.combine(self.ends_at, datetime.min.time()),
        }
