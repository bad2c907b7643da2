# SPDX-License-Identifier: Apache-2.0
"""Study participant model."""
from datetime import datetime

from sqlmodel import Field, SQLModel


class StudyParticipant(SQLModel, table=True):
    __tablename__ = "study_participants"
    id: int | None = Field(default=None, primary_key=True)
    study_id: int = Field(foreign_key="studies.id")
    participant_name: str = ""
    region: str = ""
    persona: str = ""
    progress_percent: int = 0
    participation_status: str = "not_started"
    started_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
