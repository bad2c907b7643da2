# SPDX-License-Identifier: Apache-2.0
"""SDK-specific exceptions."""


class StudyMonitorSDKError(Exception):
    """Base exception for SDK."""


class APIError(StudyMonitorSDKError):
    """API request failed (HTTP or transport)."""

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}" if status_code else message)
