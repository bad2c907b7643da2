# SPDX-License-Identifier: Apache-2.0
"""Time-windowed study analytics over participant rating and completion events."""
from studymonitor.analytics.assembler import StudyAnalytics
from studymonitor.analytics.engine import AnalyticsOptions, build_study_analytics
from studymonitor.analytics.snapshot import ArtifactRef, ParticipantSnapshot, RatingEvent, StudySnapshot

__all__ = [
    "AnalyticsOptions",
    "ArtifactRef",
    "ParticipantSnapshot",
    "RatingEvent",
    "StudyAnalytics",
    "StudySnapshot",
    "build_study_analytics",
]
