# SPDX-License-Identifier: Apache-2.0
"""Study endpoints: create, get, attach artifact, add comparison, enroll participant, record evaluation."""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from sqlalchemy import func
from sqlmodel import select

from studymonitor.config import STUDY_NOT_FOUND_MESSAGE
from studymonitor.core.exceptions import NotFoundError
from studymonitor.database import Session, engine
from studymonitor.models import Artifact, Evaluation, Study, StudyArtifact, StudyComparison, StudyParticipant
from studymonitor.schemas import (
    EvaluationCreate,
    ParticipantEnroll,
    StudyArtifactCreate,
    StudyComparisonCreate,
    StudyCreate,
)

router = APIRouter(prefix="", tags=["studies"])


def _require_study(session: Session, study_id: int) -> Study:
    study = session.get(Study, study_id)
    if not study:
        raise NotFoundError(STUDY_NOT_FOUND_MESSAGE.format(study_id=study_id))
    return study


def _utc_naive(value: datetime | None) -> datetime | None:
    """Stored timestamps are naive UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _require_in_study(session: Session, model, row_id: int | None, study_id: int, label: str):
    row = session.get(model, row_id) if row_id is not None else None
    if row is None or row.study_id != study_id:
        raise HTTPException(status_code=422, detail=f"{label} {row_id} does not belong to study {study_id}")
    return row


@router.post("")
def studies_create(body: StudyCreate):
    """Create a study (draft)."""
    with Session(engine) as session:
        study = Study(
            title=body.title,
            description=body.description,
            study_code=body.study_code,
            principal_investigator=body.principal_investigator,
            timeline_start=_utc_naive(body.timeline_start),
            timeline_end=_utc_naive(body.timeline_end),
        )
        session.add(study)
        session.commit()
        session.refresh(study)
        return {"study_id": study.id, "status": study.status}


@router.get("/{study_id}")
def studies_get(study_id: int):
    """Study metadata with artifact and participant counts."""
    with Session(engine) as session:
        study = _require_study(session, study_id)
        n_artifacts = session.exec(
            select(func.count(StudyArtifact.id)).where(StudyArtifact.study_id == study_id)
        ).one()
        n_participants = session.exec(
            select(func.count(StudyParticipant.id)).where(StudyParticipant.study_id == study_id)
        ).one()
        return {
            "id": study.id,
            "title": study.title,
            "description": study.description,
            "study_code": study.study_code,
            "principal_investigator": study.principal_investigator,
            "status": study.status,
            "timeline_start": study.timeline_start.isoformat() if study.timeline_start else None,
            "timeline_end": study.timeline_end.isoformat() if study.timeline_end else None,
            "artifact_count": n_artifacts,
            "participant_count": n_participants,
            "created_at": study.created_at.isoformat(),
        }


@router.post("/{study_id}/artifacts")
def studies_add_artifact(study_id: int, body: StudyArtifactCreate):
    """Create an artifact and attach it to the study."""
    with Session(engine) as session:
        _require_study(session, study_id)
        artifact = Artifact(name=body.name)
        session.add(artifact)
        session.commit()
        session.refresh(artifact)
        study_artifact = StudyArtifact(study_id=study_id, artifact_id=artifact.id, label=body.label)
        session.add(study_artifact)
        session.commit()
        session.refresh(study_artifact)
        return {"study_artifact_id": study_artifact.id, "artifact_id": artifact.id}


@router.post("/{study_id}/comparisons")
def studies_add_comparison(study_id: int, body: StudyComparisonCreate):
    """Pair two study artifacts for evaluation."""
    with Session(engine) as session:
        _require_study(session, study_id)
        for sa_id in (body.primary_study_artifact_id, body.secondary_study_artifact_id):
            if sa_id is not None:
                _require_in_study(session, StudyArtifact, sa_id, study_id, "Study artifact")
        comparison = StudyComparison(
            study_id=study_id,
            primary_study_artifact_id=body.primary_study_artifact_id,
            secondary_study_artifact_id=body.secondary_study_artifact_id,
            prompt=body.prompt,
        )
        session.add(comparison)
        session.commit()
        session.refresh(comparison)
        return {"comparison_id": comparison.id}


@router.post("/{study_id}/participants")
def studies_enroll(study_id: int, body: ParticipantEnroll):
    """Enroll a participant."""
    with Session(engine) as session:
        _require_study(session, study_id)
        participant = StudyParticipant(
            study_id=study_id,
            participant_name=body.participant_name,
            region=body.region,
            persona=body.persona,
            progress_percent=body.progress_percent,
            participation_status="completed" if body.completed_at else ("in_progress" if body.started_at else "not_started"),
            started_at=_utc_naive(body.started_at),
            completed_at=_utc_naive(body.completed_at),
        )
        session.add(participant)
        session.commit()
        session.refresh(participant)
        return {"study_participant_id": participant.id}


@router.post("/{study_id}/evaluations")
def studies_record_evaluation(study_id: int, body: EvaluationCreate):
    """Record a draft or submitted evaluation of a comparison."""
    with Session(engine) as session:
        _require_study(session, study_id)
        _require_in_study(session, StudyComparison, body.comparison_id, study_id, "Comparison")
        _require_in_study(session, StudyParticipant, body.study_participant_id, study_id, "Participant")
        submitted_at = _utc_naive(body.submitted_at)
        if body.status == "submitted" and submitted_at is None:
            submitted_at = datetime.utcnow()
        evaluation = Evaluation(
            study_id=study_id,
            comparison_id=body.comparison_id,
            study_participant_id=body.study_participant_id,
            status=body.status,
            preference=body.preference,
            rating=body.rating,
            submitted_at=submitted_at,
        )
        session.add(evaluation)
        session.commit()
        session.refresh(evaluation)
        return {"evaluation_id": evaluation.id, "status": evaluation.status}
