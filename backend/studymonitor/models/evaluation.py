# SPDX-License-Identifier: Apache-2.0
"""Evaluation model: one participant's judgement of one comparison."""
from datetime import datetime

from sqlmodel import Field, SQLModel


class Evaluation(SQLModel, table=True):
    __tablename__ = "evaluations"
    id: int | None = Field(default=None, primary_key=True)
    study_id: int = Field(foreign_key="studies.id")
    comparison_id: int = Field(foreign_key="study_comparisons.id")
    study_participant_id: int = Field(foreign_key="study_participants.id")
    status: str = "draft"
    preference: str | None = None
    rating: float | None = None
    submitted_at: datetime | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
