# SPDX-License-Identifier: Apache-2.0
"""Custom exception classes. Each carries the HTTP status and the client-facing message."""
from __future__ import annotations


class StudyMonitorError(Exception):
    """Base exception for the study monitor."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(StudyMonitorError):
    """Resource not found."""

    status_code = 404
    default_message = "Resource not found"


class InvalidFilterError(StudyMonitorError):
    """A date filter could not be parsed."""

    status_code = 400
    default_message = "Invalid date filter provided"


class InvertedRangeError(StudyMonitorError):
    """The window start lies after the window end."""

    status_code = 400
    default_message = "The start date must be before the end date"


class AnalyticsUnavailableError(StudyMonitorError):
    """Unexpected failure while building analytics; details stay in the log."""

    status_code = 500
    default_message = "Unable to build study analytics right now"
