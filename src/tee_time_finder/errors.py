"""Exceptions raised at the tee time server boundary."""

from __future__ import annotations

from typing import Optional


class TeeTimeFinderError(RuntimeError):
    """Base class for failures the user should be told about."""


class CollaboratorError(TeeTimeFinderError):
    """The tee time server could not be reached or answered with an error."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AlertRejectedError(CollaboratorError):
    """The server refused an alert request and explained why."""


class AlertValidationError(TeeTimeFinderError):
    """An alert request is incomplete; raised before any request is sent."""
