# SPDX-License-Identifier: Apache-2.0
"""Immutable study snapshot handed to the analytics engine for one request.

Timestamps are kept as ISO-8601 strings exactly as the persistence layer
produced them; the engine parses them lazily and drops the ones that fail.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ArtifactRef:
    id: str
    name: str


@dataclass(frozen=True)
class RatingEvent:
    """One submitted rating of one artifact by one participant."""

    artifact_id: str
    rating: float
    submitted_at: str
    artifact_name: str | None = None


@dataclass(frozen=True)
class ParticipantSnapshot:
    id: str
    name: str
    region: str
    persona: str
    progress: float
    joined_at: str
    completed_at: str | None = None
    ratings: tuple[RatingEvent, ...] = ()


@dataclass(frozen=True)
class StudySnapshot:
    id: str
    title: str
    study_code: str
    principal_investigator: str
    start_date: str | None = None
    end_date: str | None = None
    artifacts: tuple[ArtifactRef, ...] = ()
    participants: tuple[ParticipantSnapshot, ...] = ()

    def metadata(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "studyCode": self.study_code,
            "principalInvestigator": self.principal_investigator,
            "startDate": self.start_date,
            "endDate": self.end_date,
        }
