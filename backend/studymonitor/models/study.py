# SPDX-License-Identifier: Apache-2.0
"""Study, Artifact, StudyArtifact, StudyComparison models."""
from datetime import datetime

from sqlmodel import Field, SQLModel


class Study(SQLModel, table=True):
    __tablename__ = "studies"
    id: int | None = Field(default=None, primary_key=True)
    title: str
    description: str = ""
    study_code: str = ""
    principal_investigator: str = ""
    status: str = "draft"
    timeline_start: datetime | None = None
    timeline_end: datetime | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class Artifact(SQLModel, table=True):
    __tablename__ = "artifacts"
    id: int | None = Field(default=None, primary_key=True)
    name: str
    created_at: datetime = Field(default_factory=datetime.utcnow)


class StudyArtifact(SQLModel, table=True):
    __tablename__ = "study_artifacts"
    id: int | None = Field(default=None, primary_key=True)
    study_id: int = Field(foreign_key="studies.id")
    artifact_id: int | None = Field(default=None, foreign_key="artifacts.id")
    label: str = ""


class StudyComparison(SQLModel, table=True):
    __tablename__ = "study_comparisons"
    id: int | None = Field(default=None, primary_key=True)
    study_id: int = Field(foreign_key="studies.id")
    primary_study_artifact_id: int | None = Field(default=None, foreign_key="study_artifacts.id")
    secondary_study_artifact_id: int | None = Field(default=None, foreign_key="study_artifacts.id")
    prompt: str = ""
