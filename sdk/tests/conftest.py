# SPDX-License-Identifier: Apache-2.0
import pytest
import requests

from studymonitor_client import StudyMonitorClient


class FakeResponse:
    def __init__(self, status_code: int, payload=None, reason: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.reason = reason

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    """Stands in for requests.Session; replays queued responses and records calls."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def analytics_payload(refresh: int = 30, average: float = 4.0) -> dict:
    return {
        "study": {"id": "1", "title": "Readability", "studyCode": "ST-1"},
        "filters": {"from": "2025-03-01T00:00:00.000Z", "to": "2025-03-10T23:59:59.999Z", "participantId": "all"},
        "summary": {
            "averageRating": average,
            "completionPercentage": 50,
            "submissionsCount": 3,
            "activeParticipants": 2,
            "completedParticipants": 1,
            "refreshIntervalSeconds": refresh,
            "lastUpdated": "2025-04-01T09:30:00.000Z",
        },
        "charts": {
            "ratingsTrend": [],
            "completionTrend": [],
            "artifactAverages": [{"artifactId": "a", "name": "Sorting", "value": 3.5, "submissions": 2}],
        },
        "participants": [],
        "participantFilters": [],
        "exportable": True,
    }


@pytest.fixture
def response():
    """Factory for canned HTTP responses."""
    return FakeResponse


@pytest.fixture
def payload():
    """Factory for analytics payloads."""
    return analytics_payload


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def client(fake_session):
    return StudyMonitorClient("http://monitor.test/", session=fake_session)


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
