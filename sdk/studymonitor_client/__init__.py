# SPDX-License-Identifier: Apache-2.0
"""Study Monitor client SDK: fetch and poll study analytics."""
from .client import StudyMonitorClient
from .exceptions import APIError, StudyMonitorSDKError

__all__ = ["APIError", "StudyMonitorClient", "StudyMonitorSDKError"]
