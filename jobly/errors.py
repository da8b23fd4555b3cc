"""Domain errors raised by the query builders and the access layer.

Each error carries the HTTP status the app's exception handler answers with,
so routers never translate them by hand.
"""

from __future__ import annotations

from fastapi import status


class JoblyError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class EmptyPayloadError(JoblyError):
    """An update was requested with no fields to change."""

    def __init__(self, message: str = "No data") -> None:
        super().__init__(message)


class InvalidRangeError(JoblyError):
    """A filter's lower bound exceeds its upper bound."""


class DuplicateKeyError(JoblyError):
    """An insert collides with an existing natural key."""


class NotFoundError(JoblyError):
    status_code = status.HTTP_404_NOT_FOUND
