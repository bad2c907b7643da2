# SPDX-License-Identifier: Apache-2.0
"""Response assembly: study metadata, window echo, summary, charts, participants."""
from __future__ import annotations

from dataclasses import dataclass, field

from studymonitor.analytics.aggregators import ArtifactAverage, ParticipantSummary, TimelinePoint
from studymonitor.analytics.roster import ALL_PARTICIPANTS
from studymonitor.analytics.snapshot import StudySnapshot
from studymonitor.analytics.window import TimeWindow


@dataclass(frozen=True)
class AnalyticsSummary:
    average_rating: float
    completion_percentage: int
    submissions_count: int
    active_participants: int
    completed_participants: int
    refresh_interval_seconds: int
    last_updated: str

    def to_dict(self) -> dict:
        return {
            "averageRating": self.average_rating,
            "completionPercentage": self.completion_percentage,
            "submissionsCount": self.submissions_count,
            "activeParticipants": self.active_participants,
            "completedParticipants": self.completed_participants,
            "refreshIntervalSeconds": self.refresh_interval_seconds,
            "lastUpdated": self.last_updated,
        }


@dataclass(frozen=True)
class StudyAnalytics:
    """Monitor dashboard payload for one study and one window."""

    study: dict
    filters: dict
    summary: AnalyticsSummary
    timeline: list[TimelinePoint] = field(default_factory=list)
    artifact_averages: list[ArtifactAverage] = field(default_factory=list)
    participants: list[ParticipantSummary] = field(default_factory=list)
    participant_filters: list[dict] = field(default_factory=list)
    exportable: bool = True

    def to_dict(self) -> dict:
        return {
            "study": dict(self.study),
            "filters": dict(self.filters),
            "summary": self.summary.to_dict(),
            "charts": {
                "ratingsTrend": [{"date": p.date, "value": p.average_rating} for p in self.timeline],
                "completionTrend": [{"date": p.date, "value": p.completion_percent} for p in self.timeline],
                "artifactAverages": [a.to_dict() for a in self.artifact_averages],
            },
            "participants": [p.to_dict() for p in self.participants],
            "participantFilters": [dict(f) for f in self.participant_filters],
            "exportable": self.exportable,
        }


def serialize_filters(window: TimeWindow, participant_id: str | None) -> dict:
    return {**window.serialize(), "participantId": participant_id or ALL_PARTICIPANTS}


def participant_filters(study: StudySnapshot) -> list[dict]:
    """Unfiltered participant list, so the dashboard filter control stays populated."""
    return [{"id": p.id, "name": p.name, "region": p.region} for p in study.participants]


def assemble_empty(
    study: StudySnapshot,
    window: TimeWindow,
    participant_id: str | None,
    *,
    refresh_interval_seconds: int,
    last_updated: str,
) -> StudyAnalytics:
    """Zeroed but structurally complete payload for an empty roster."""
    return StudyAnalytics(
        study=study.metadata(),
        filters=serialize_filters(window, participant_id),
        summary=AnalyticsSummary(
            average_rating=0,
            completion_percentage=0,
            submissions_count=0,
            active_participants=0,
            completed_participants=0,
            refresh_interval_seconds=refresh_interval_seconds,
            last_updated=last_updated,
        ),
        participant_filters=participant_filters(study),
    )


def assemble(
    study: StudySnapshot,
    window: TimeWindow,
    participant_id: str | None,
    *,
    summary: AnalyticsSummary,
    timeline: list[TimelinePoint],
    artifact_averages: list[ArtifactAverage],
    participants: list[ParticipantSummary],
) -> StudyAnalytics:
    return StudyAnalytics(
        study=study.metadata(),
        filters=serialize_filters(window, participant_id),
        summary=summary,
        timeline=timeline,
        artifact_averages=artifact_averages,
        participants=participants,
        participant_filters=participant_filters(study),
    )
