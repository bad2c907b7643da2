# SPDX-License-Identifier: Apache-2.0
"""Reducers over collected events: per-artifact averages, daily timeline, per-participant summary.

Deterministic, no I/O. Each reducer reads the collected events and returns new values.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from studymonitor.analytics.events import CollectedCompletion, CollectedRating
from studymonitor.analytics.snapshot import ArtifactRef, ParticipantSnapshot
from studymonitor.analytics.window import TimeWindow

COMPLETED = "completed"
IN_PROGRESS = "in-progress"


def average(values: list[float], *, allow_none: bool = False) -> float | None:
    """Mean rounded half up to 2 decimals. Empty input gives 0, or None when allow_none."""
    if not values:
        return None if allow_none else 0
    mean = Decimal(str(sum(values) / len(values)))
    return float(mean.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def percentage(part: int, total: int) -> int:
    """Integer percentage, rounding halves up, capped at 100."""
    if total <= 0:
        return 0
    return min(100, (200 * part + total) // (2 * total))


@dataclass(frozen=True)
class ArtifactAverage:
    artifact_id: str
    name: str
    value: float
    submissions: int

    def to_dict(self) -> dict:
        return {
            "artifactId": self.artifact_id,
            "name": self.name,
            "value": self.value,
            "submissions": self.submissions,
        }


@dataclass(frozen=True)
class TimelinePoint:
    date: str
    average_rating: float
    completion_percent: int


@dataclass(frozen=True)
class ParticipantSummary:
    id: str
    name: str
    region: str
    persona: str
    progress: float
    completion_status: str
    average_rating: float | None
    last_submission_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "region": self.region,
            "persona": self.persona,
            "progress": self.progress,
            "completionStatus": self.completion_status,
            "averageRating": self.average_rating,
            "lastSubmissionAt": self.last_submission_at,
        }


def artifact_averages(
    events: list[CollectedRating],
    artifacts: tuple[ArtifactRef, ...] = (),
) -> list[ArtifactAverage]:
    """Mean rating per artifact, in order of first appearance."""
    names = {artifact.id: artifact.name for artifact in artifacts}
    ratings: dict[str, list[float]] = {}
    labels: dict[str, str] = {}
    for event in events:
        if event.artifact_id not in ratings:
            ratings[event.artifact_id] = []
            labels[event.artifact_id] = names.get(event.artifact_id) or event.artifact_name or str(event.artifact_id)
        ratings[event.artifact_id].append(event.rating)
    return [
        ArtifactAverage(
            artifact_id=artifact_id,
            name=labels[artifact_id],
            value=average(values),
            submissions=len(values),
        )
        for artifact_id, values in ratings.items()
    ]


def build_timeline(
    ratings: list[CollectedRating],
    completions: list[CollectedCompletion],
    window: TimeWindow,
    roster_size: int,
) -> list[TimelinePoint]:
    """One point per UTC day in the window.

    Days without ratings report 0 so the series stays numeric. Completion is
    cumulative from the window start, so it never decreases.
    """
    ratings_by_day: dict[str, list[float]] = defaultdict(list)
    for event in ratings:
        ratings_by_day[event.day].append(event.rating)
    completions_by_day: dict[str, int] = defaultdict(int)
    for event in completions:
        completions_by_day[event.day] += 1

    timeline = []
    completed = 0
    for day in window.days():
        completed += completions_by_day.get(day, 0)
        timeline.append(
            TimelinePoint(
                date=day,
                average_rating=average(ratings_by_day.get(day, [])),
                completion_percent=percentage(completed, roster_size),
            )
        )
    return timeline


def participant_summaries(
    roster: tuple[ParticipantSnapshot, ...],
    ratings: list[CollectedRating],
) -> list[ParticipantSummary]:
    """Summary per roster member, sorted by progress descending (stable)."""
    by_participant: dict[str, list[CollectedRating]] = defaultdict(list)
    for event in ratings:
        by_participant[event.participant_id].append(event)

    summaries = []
    for participant in roster:
        own = by_participant.get(participant.id, [])
        last_submission_at = participant.joined_at
        if own:
            last_submission_at = max(own, key=lambda event: event.moment).submitted_at
        summaries.append(
            ParticipantSummary(
                id=participant.id,
                name=participant.name,
                region=participant.region,
                persona=participant.persona,
                progress=participant.progress,
                completion_status=COMPLETED if participant.completed_at else IN_PROGRESS,
                average_rating=average([event.rating for event in own], allow_none=True),
                last_submission_at=last_submission_at,
            )
        )
    return sorted(summaries, key=lambda summary: summary.progress or 0, reverse=True)
