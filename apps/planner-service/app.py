"""
App assembly entry point.

Re-exports the FastAPI `app` from `planner.api.main` so the service runs with
``uvicorn app:app``.
"""

from planner.api.main import app  # noqa: F401
