# SPDX-License-Identifier: Apache-2.0
"""Pydantic request schemas."""
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field as PydanticField


class StudyCreate(BaseModel):
    title: str = PydanticField(..., max_length=255)
    description: str = PydanticField("", max_length=2000)
    study_code: str = PydanticField("", max_length=32)
    principal_investigator: str = PydanticField("", max_length=200)
    timeline_start: datetime | None = None
    timeline_end: datetime | None = None


class StudyArtifactCreate(BaseModel):
    name: str = PydanticField(..., max_length=255)
    label: str = PydanticField("", max_length=64)


class StudyComparisonCreate(BaseModel):
    primary_study_artifact_id: int | None = None
    secondary_study_artifact_id: int | None = None
    prompt: str = PydanticField("", max_length=2000)


class ParticipantEnroll(BaseModel):
    participant_name: str = PydanticField(..., max_length=200)
    region: str = PydanticField("", max_length=100)
    persona: str = PydanticField("", max_length=100)
    progress_percent: int = PydanticField(0, ge=0, le=100)
    started_at: datetime | None = None
    completed_at: datetime | None = None


class EvaluationCreate(BaseModel):
    comparison_id: int
    study_participant_id: int
    status: Literal["draft", "submitted"] = "draft"
    preference: Literal["primary", "secondary"] | None = None
    rating: float | None = None
    submitted_at: datetime | None = None
