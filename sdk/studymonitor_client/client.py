# SPDX-License-Identifier: Apache-2.0
"""Main SDK class: StudyMonitorClient. Wraps the analytics API and dashboard polling."""
from __future__ import annotations

import time
from collections.abc import Callable, Iterator

import requests

from .exceptions import APIError

DEFAULT_REFRESH_SECONDS = 30


class StudyMonitorClient:
    """Client for the Study Monitor API."""

    def __init__(self, api_base_url: str = "http://localhost:8000", session: requests.Session | None = None, timeout: float = 10):
        self.api_base_url = api_base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, path: str, params: dict | None = None) -> dict:
        try:
            resp = self.session.get(f"{self.api_base_url}{path}", params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise APIError(None, f"Request failed: {e}") from e
        if not resp.ok:
            try:
                message = resp.json().get("message") or resp.reason
            except ValueError:
                message = resp.reason or "Request failed"
            raise APIError(resp.status_code, message)
        return resp.json()

    def health(self) -> dict:
        return self._get("/system/health")

    def get_study_analytics(
        self,
        study_id: int | str,
        from_date: str | None = None,
        to_date: str | None = None,
        participant_id: str | None = None,
    ) -> dict:
        """Fetch the monitor payload for one study. Omitted filters use the server defaults."""
        params = {}
        if from_date:
            params["from"] = from_date
        if to_date:
            params["to"] = to_date
        if participant_id:
            params["participantId"] = participant_id
        return self._get(f"/analytics/study/{study_id}", params=params)

    def watch_study_analytics(
        self,
        study_id: int | str,
        from_date: str | None = None,
        to_date: str | None = None,
        participant_id: str | None = None,
        iterations: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Iterator[dict]:
        """Yield payloads, waiting summary.refreshIntervalSeconds between polls. iterations=None polls forever."""
        count = 0
        while iterations is None or count < iterations:
            payload = self.get_study_analytics(study_id, from_date, to_date, participant_id)
            yield payload
            count += 1
            if iterations is not None and count >= iterations:
                break
            interval = payload.get("summary", {}).get("refreshIntervalSeconds") or DEFAULT_REFRESH_SECONDS
            sleep(interval)
