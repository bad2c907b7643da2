# SPDX-License-Identifier: Apache-2.0
"""Read a study's rows and build the immutable snapshot the analytics engine consumes."""
from __future__ import annotations

from datetime import datetime

from sqlmodel import Session, select

from studymonitor.analytics.snapshot import ArtifactRef, ParticipantSnapshot, RatingEvent, StudySnapshot
from studymonitor.analytics.window import parse_timestamp, to_iso
from studymonitor.models import Artifact, Evaluation, Study, StudyArtifact, StudyComparison, StudyParticipant

SUBMITTED = "submitted"


def _iso_or_none(value: datetime | str | None) -> str | None:
    moment = parse_timestamp(value)
    return to_iso(moment) if moment is not None else None


def format_artifact_name(study_artifact: StudyArtifact, artifact: Artifact | None) -> str:
    """'label: name' when both exist, else whichever exists."""
    artifact_name = artifact.name if artifact else None
    if study_artifact.label and artifact_name:
        return f"{study_artifact.label}: {artifact_name}"
    return artifact_name or study_artifact.label or f"Artifact {study_artifact.id}"


def resolve_event_time(evaluation: Evaluation) -> str | None:
    """First usable timestamp among submitted_at, updated_at, created_at."""
    for candidate in (evaluation.submitted_at, evaluation.updated_at, evaluation.created_at):
        iso = _iso_or_none(candidate)
        if iso is not None:
            return iso
    return None


def pick_rated_artifact(
    evaluation: Evaluation,
    comparison: StudyComparison | None,
    artifacts_by_study_artifact: dict[int, ArtifactRef],
) -> ArtifactRef:
    """The artifact an evaluation's rating is attributed to."""
    fallback = ArtifactRef(
        id=f"comparison-{evaluation.comparison_id}",
        name=(comparison.prompt if comparison and comparison.prompt else f"Comparison {evaluation.comparison_id}"),
    )
    if comparison is None:
        return fallback

    primary = artifacts_by_study_artifact.get(comparison.primary_study_artifact_id)
    secondary = artifacts_by_study_artifact.get(comparison.secondary_study_artifact_id)
    if evaluation.preference == "primary" and primary:
        return primary
    if evaluation.preference == "secondary" and secondary:
        return secondary
    if primary and secondary:
        return ArtifactRef(id=fallback.id, name=f"{primary.name} vs {secondary.name}")
    return primary or secondary or fallback


def build_study_snapshot(session: Session, study_id: int) -> StudySnapshot | None:
    """Snapshot of one study, or None if it does not exist. Never writes."""
    study = session.get(Study, study_id)
    if study is None:
        return None

    study_artifacts = list(
        session.exec(select(StudyArtifact).where(StudyArtifact.study_id == study.id).order_by(StudyArtifact.id))
    )
    artifact_ids = [sa.artifact_id for sa in study_artifacts if sa.artifact_id is not None]
    artifacts = {a.id: a for a in session.exec(select(Artifact).where(Artifact.id.in_(artifact_ids)))} if artifact_ids else {}
    artifacts_by_study_artifact = {
        sa.id: ArtifactRef(
            id=str(sa.artifact_id if sa.artifact_id is not None else sa.id),
            name=format_artifact_name(sa, artifacts.get(sa.artifact_id)),
        )
        for sa in study_artifacts
    }
    comparisons = {
        c.id: c for c in session.exec(select(StudyComparison).where(StudyComparison.study_id == study.id))
    }

    participant_rows = list(
        session.exec(
            select(StudyParticipant)
            .where(StudyParticipant.study_id == study.id)
            .order_by(StudyParticipant.created_at, StudyParticipant.id)
        )
    )
    evaluation_rows = list(
        session.exec(
            select(Evaluation).where(Evaluation.study_id == study.id).order_by(Evaluation.created_at, Evaluation.id)
        )
    )

    working = {
        row.id: {
            "row": row,
            "completed_at": _iso_or_none(row.completed_at),
            "progress": row.progress_percent or 0,
            "ratings": [],
        }
        for row in participant_rows
    }
    for evaluation in evaluation_rows:
        entry = working.get(evaluation.study_participant_id)
        if entry is None or evaluation.status != SUBMITTED:
            continue
        timestamp = resolve_event_time(evaluation)
        if timestamp is None:
            continue
        if entry["completed_at"] is None:
            entry["completed_at"] = timestamp
            entry["progress"] = max(entry["progress"], 100)
        if evaluation.rating is None:
            continue
        artifact = pick_rated_artifact(evaluation, comparisons.get(evaluation.comparison_id), artifacts_by_study_artifact)
        entry["ratings"].append(
            RatingEvent(
                artifact_id=artifact.id,
                artifact_name=artifact.name,
                rating=float(evaluation.rating),
                submitted_at=timestamp,
            )
        )

    participants = []
    for entry in working.values():
        row = entry["row"]
        participants.append(
            ParticipantSnapshot(
                id=str(row.id),
                name=row.participant_name or f"Participant {row.id}",
                region=row.region or "Unknown",
                persona=row.persona or "Participant",
                progress=entry["progress"],
                joined_at=_iso_or_none(row.started_at or row.created_at) or _iso_or_none(datetime.utcnow()),
                completed_at=entry["completed_at"],
                ratings=tuple(entry["ratings"]),
            )
        )

    return StudySnapshot(
        id=str(study.id),
        title=study.title,
        study_code=study.study_code or f"STD-{study.id:03d}",
        principal_investigator=study.principal_investigator or "Researcher",
        start_date=_iso_or_none(study.timeline_start),
        end_date=_iso_or_none(study.timeline_end),
        artifacts=tuple(artifacts_by_study_artifact.values()),
        participants=tuple(participants),
    )
