"""
URL utilities for building absolute links in emails and redirects.

API_BASE_URL is the public root of this service (confirmation links point at
it). WEB_BASE_URL is the web application that users land on after following
a confirmation link.
"""
from __future__ import annotations

import os
import uuid

DEFAULT_API_BASE_URL = "http://localhost:3333"
DEFAULT_WEB_BASE_URL = "http://localhost:3000"


def _add_scheme_if_missing(host: str, default: str) -> str:
    h = host.strip()
    if not h:
        return default
    if h.startswith("http://") or h.startswith("https://"):
        return h
    # use http for localhost, otherwise https
    lower = h.lower()
    if lower.startswith("localhost") or lower.startswith("127.0.0.1"):
        return f"http://{h}"
    return f"https://{h}"


def _strip_trailing_slash(url: str) -> str:
    return url.rstrip("/")


def _base_url_from_env(var: str, default: str) -> str:
    value = os.getenv(var)
    if value and value.strip():
        return _strip_trailing_slash(_add_scheme_if_missing(value, default))
    return default


def get_api_base_url() -> str:
    """Return the normalized public base URL of the API."""
    return _base_url_from_env("API_BASE_URL", DEFAULT_API_BASE_URL)


def get_web_base_url() -> str:
    """Return the normalized base URL of the web application."""
    return _base_url_from_env("WEB_BASE_URL", DEFAULT_WEB_BASE_URL)


def build_trip_confirm_link(trip_id: uuid.UUID | str) -> str:
    return f"{get_api_base_url()}/trips/{trip_id}/confirm"


def build_participant_confirm_link(participant_id: uuid.UUID | str) -> str:
    return f"{get_api_base_url()}/participants/{participant_id}/confirm"


def build_web_trip_link(trip_id: uuid.UUID | str) -> str:
    return f"{get_web_base_url()}/trips/{trip_id}"
