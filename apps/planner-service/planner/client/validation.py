"""Input validators used by the client forms (same rules as the API)."""

from planner.utils.validation import is_valid_email, is_valid_url

__all__ = ["is_valid_email", "is_valid_url"]
