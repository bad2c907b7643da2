# SPDX-License-Identifier: Apache-2.0
"""Flatten a roster into in-window rating and completion events."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from studymonitor.analytics.snapshot import ParticipantSnapshot
from studymonitor.analytics.window import TimeWindow, day_key


@dataclass(frozen=True)
class CollectedRating:
    participant_id: str
    artifact_id: str
    artifact_name: str | None
    rating: float
    submitted_at: str
    moment: datetime
    day: str


@dataclass(frozen=True)
class CollectedCompletion:
    participant_id: str
    completed_at: str
    day: str


def collect_rating_events(roster, window: TimeWindow) -> list[CollectedRating]:
    """Every in-window rating, tagged with its participant and UTC day. Bad timestamps are skipped."""
    events = []
    for participant in roster:
        for rating in participant.ratings:
            moment = window.moment_within(rating.submitted_at)
            if moment is None:
                continue
            events.append(
                CollectedRating(
                    participant_id=participant.id,
                    artifact_id=rating.artifact_id,
                    artifact_name=rating.artifact_name,
                    rating=rating.rating,
                    submitted_at=rating.submitted_at,
                    moment=moment,
                    day=day_key(moment),
                )
            )
    return events


def collect_completion_events(roster: tuple[ParticipantSnapshot, ...], window: TimeWindow) -> list[CollectedCompletion]:
    events = []
    for participant in roster:
        if not participant.completed_at:
            continue
        moment = window.moment_within(participant.completed_at)
        if moment is None:
            continue
        events.append(
            CollectedCompletion(
                participant_id=participant.id,
                completed_at=participant.completed_at,
                day=day_key(moment),
            )
        )
    return events
