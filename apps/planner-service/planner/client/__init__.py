"""
Headless plann.er client: HTTP API access plus the trip wizard, calendar
range selection, form validation and list presenters used by the app.
"""

from .api import PlannerAPIError, PlannerClient
from .calendar import DatesSelected, format_dates_in_text, order_starts_at_and_ends_at
from .forms import ActivityForm, FormValidationError, GuestConfirmationForm, LinkForm, TripUpdateForm
from .wizard import StepForm, TripWizard

__all__ = [
    "PlannerAPIError",
    "PlannerClient",
    "DatesSelected",
    "format_dates_in_text",
    "order_starts_at_and_ends_at",
    "ActivityForm",
    "FormValidationError",
    "GuestConfirmationForm",
    "LinkForm",
    "TripUpdateForm",
    "StepForm",
    "TripWizard",
]
