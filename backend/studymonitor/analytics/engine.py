# SPDX-License-Identifier: Apache-2.0
"""Study analytics pipeline: window -> roster -> events -> aggregators -> payload.

Pure function of the snapshot, the query and the injected clock. Nothing is
cached between calls and the snapshot is never modified.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from studymonitor.analytics.aggregators import (
    artifact_averages,
    average,
    build_timeline,
    participant_summaries,
    percentage,
)
from studymonitor.analytics.assembler import AnalyticsSummary, StudyAnalytics, assemble, assemble_empty
from studymonitor.analytics.events import collect_completion_events, collect_rating_events
from studymonitor.analytics.roster import filter_roster, normalize_participant_id
from studymonitor.analytics.snapshot import StudySnapshot
from studymonitor.analytics.window import parse_timestamp, resolve_window, to_iso

logger = logging.getLogger("studymonitor")


@dataclass(frozen=True)
class AnalyticsOptions:
    refresh_interval_seconds: int = 30
    default_window_days: int = 30


def build_study_analytics(
    study: StudySnapshot,
    *,
    from_value: str | None = None,
    to_value: str | None = None,
    participant_id: str | None = None,
    now: datetime,
    options: AnalyticsOptions | None = None,
) -> StudyAnalytics:
    """Build the monitor payload. Raises InvalidFilterError / InvertedRangeError on bad date filters."""
    options = options or AnalyticsOptions()
    window = resolve_window(from_value, to_value, now=now, default_window_days=options.default_window_days)
    participant_id = normalize_participant_id(participant_id)
    last_updated = to_iso(parse_timestamp(now))

    roster = filter_roster(study.participants, participant_id, window)
    logger.debug(
        "Analytics for study %s: window %s..%s, roster %d of %d",
        study.id, window.start, window.end, len(roster), len(study.participants),
    )
    if not roster:
        return assemble_empty(
            study,
            window,
            participant_id,
            refresh_interval_seconds=options.refresh_interval_seconds,
            last_updated=last_updated,
        )

    ratings = collect_rating_events(roster, window)
    completions = collect_completion_events(roster, window)
    completed = sum(1 for participant in roster if participant.completed_at)

    summary = AnalyticsSummary(
        average_rating=average([event.rating for event in ratings]),
        completion_percentage=percentage(completed, len(roster)),
        submissions_count=len(ratings),
        active_participants=len(roster),
        completed_participants=completed,
        refresh_interval_seconds=options.refresh_interval_seconds,
        last_updated=last_updated,
    )
    return assemble(
        study,
        window,
        participant_id,
        summary=summary,
        timeline=build_timeline(ratings, completions, window, len(roster)),
        artifact_averages=artifact_averages(ratings, study.artifacts),
        participants=participant_summaries(roster, ratings),
    )
