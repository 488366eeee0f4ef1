"""
Trip creation wizard.

Two steps: trip details (destination and dates) and guest e-mails. Moving
forward validates the current step; the details become read-only until the
user goes back to change them.
"""
from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time
from enum import IntEnum
from typing import List

from planner.client.api import PlannerClient
from planner.client.calendar import DatesSelected, order_starts_at_and_ends_at
from planner.client.forms import FormValidationError
from planner.client.validation import is_valid_email

logger = logging.getLogger(__name__)

MIN_DESTINATION_LENGTH = 4


class StepForm(IntEnum):
    TRIP_DETAILS = 1
    ADD_EMAIL = 2


class TripWizard:
    def __init__(self):
        self.step = StepForm.TRIP_DETAILS
        self.destination = ""
        self.selected_dates = DatesSelected()
        self.emails_to_invite: List[str] = []

    @property
    def trip_details_editable(self) -> bool:
        return self.step == StepForm.TRIP_DETAILS

    def set_destination(self, destination: str) -> bool:
        """Returns False when the details step is locked."""
        if not self.trip_details_editable:
            return False
        self.destination = destination
        return True

    def select_day(self, selected_day: date) -> bool:
        if not self.trip_details_editable:
            return False
        self.selected_dates = order_starts_at_and_ends_at(
            self.selected_dates.starts_at,
            self.selected_dates.ends_at,
            selected_day,
        )
        return True

    def next_step(self) -> bool:
        """Advance the wizard; True once the form is ready to be confirmed."""
        if self.step == StepForm.TRIP_DETAILS:
            if not self.destination.strip() or not self.selected_dates.is_complete:
                raise FormValidationError("Trip details", "Fill in all trip information to continue.")
            if len(self.destination.strip()) < MIN_DESTINATION_LENGTH:
                raise FormValidationError("Trip details", "Destination must have at least 4 characters.")
            self.step = StepForm.ADD_EMAIL
            return False
        return True

    def change_trip_details(self) -> None:
        self.step = StepForm.TRIP_DETAILS

    def add_email(self, email: str) -> None:
        email = email.strip()
        if not is_valid_email(email):
            raise FormValidationError("Guest", "Invalid e-mail!")
        if any(e.lower() == email.lower() for e in self.emails_to_invite):
            raise FormValidationError("Guest", "E-mail already added!")
        self.emails_to_invite.append(email)

    def remove_email(self, email: str) -> None:
        self.emails_to_invite = [e for e in self.emails_to_invite if e.lower() != email.lower()]

    def submit(self, client: PlannerClient, owner_name: str, owner_email: str) -> str:
        """Create the trip and return its id."""
        if self.step != StepForm.ADD_EMAIL:
            self.next_step()
        if not owner_name.strip() or not owner_email.strip():
            raise FormValidationError("Confirm trip", "Fill in your name and e-mail to confirm the trip!")
        if not is_valid_email(owner_email.strip()):
            raise FormValidationError("Confirm trip", "Invalid e-mail!")

        trip_id = client.create_trip(
            destination=self.destination.strip(),
            starts_at=datetime.combine(self.selected_dates.starts_at, time.min, tzinfo=UTC),
            ends_at=datetime.combine(self.selected_dates.ends_at, time.min, tzinfo=UTC),
            emails_to_invite=self.emails_to_invite,
            owner_name=owner_name.strip(),
            owner_email=owner_email.strip(),
        )
        logger.info("Trip %s created to %s", trip_id, self.destination)
        return trip_id
