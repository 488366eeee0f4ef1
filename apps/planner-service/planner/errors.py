"""
Domain errors raised by repositories and route handlers.

The app registers a handler that renders every `ClientError` as
``{"message": ...}`` with the error's status code.
"""
from fastapi import status


class ClientError(Exception):
    """A request the client can fix: bad dates, duplicates, unknown ids."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class TripNotFound(ClientError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Trip not found."):
        super().__init__(message)


class ParticipantNotFound(ClientError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Participant not found."):
        super().__init__(message)
