# SPDX-License-Identifier: Apache-2.0
"""Snapshot service: rows -> immutable StudySnapshot."""
from datetime import datetime

from studymonitor.analytics.snapshot import ArtifactRef
from studymonitor.database import Session, engine
from studymonitor.models import Artifact, Evaluation, Study, StudyArtifact, StudyComparison, StudyParticipant
from studymonitor.services.snapshot_service import (
    build_study_snapshot,
    format_artifact_name,
    pick_rated_artifact,
    resolve_event_time,
)

PRIMARY = ArtifactRef(id="1", name="A: Sorting")
SECONDARY = ArtifactRef(id="2", name="B: Parsing")


def test_format_artifact_name():
    assert format_artifact_name(StudyArtifact(id=3, study_id=1, label="A"), Artifact(name="Sorting")) == "A: Sorting"
    assert format_artifact_name(StudyArtifact(id=3, study_id=1), Artifact(name="Sorting")) == "Sorting"
    assert format_artifact_name(StudyArtifact(id=3, study_id=1, label="A"), None) == "A"
    assert format_artifact_name(StudyArtifact(id=3, study_id=1), None) == "Artifact 3"


def test_resolve_event_time_prefers_submitted_at():
    evaluation = Evaluation(
        study_id=1,
        comparison_id=1,
        study_participant_id=1,
        submitted_at=datetime(2025, 3, 3, 12, 0),
        updated_at=datetime(2025, 3, 4),
        created_at=datetime(2025, 3, 1),
    )
    assert resolve_event_time(evaluation) == "2025-03-03T12:00:00.000Z"
    evaluation.submitted_at = None
    assert resolve_event_time(evaluation) == "2025-03-04T00:00:00.000Z"


def test_pick_rated_artifact():
    comparison = StudyComparison(id=9, study_id=1, primary_study_artifact_id=10, secondary_study_artifact_id=11, prompt="Which reads better?")
    by_sa = {10: PRIMARY, 11: SECONDARY}

    def pick(preference, comp=comparison, mapping=by_sa):
        evaluation = Evaluation(study_id=1, comparison_id=9, study_participant_id=1, preference=preference)
        return pick_rated_artifact(evaluation, comp, mapping)

    assert pick("primary") == PRIMARY
    assert pick("secondary") == SECONDARY
    assert pick(None) == ArtifactRef(id="comparison-9", name="A: Sorting vs B: Parsing")
    assert pick("secondary", mapping={10: PRIMARY}) == PRIMARY
    assert pick(None, mapping={}) == ArtifactRef(id="comparison-9", name="Which reads better?")
    assert pick("primary", comp=None) == ArtifactRef(id="comparison-9", name="Comparison 9")


def test_build_study_snapshot_unknown_study():
    with Session(engine) as session:
        assert build_study_snapshot(session, 987654) is None


def test_build_study_snapshot_from_rows():
    with Session(engine) as session:
        study = Study(title="Snapshot Study")
        session.add(study)
        session.commit()
        session.refresh(study)
        artifact = Artifact(name="Sorting")
        session.add(artifact)
        session.commit()
        session.refresh(artifact)
        study_artifact = StudyArtifact(study_id=study.id, artifact_id=artifact.id, label="A")
        session.add(study_artifact)
        session.commit()
        session.refresh(study_artifact)
        comparison = StudyComparison(study_id=study.id, primary_study_artifact_id=study_artifact.id)
        session.add(comparison)
        first = StudyParticipant(study_id=study.id, created_at=datetime(2025, 3, 1, 8, 0), progress_percent=40)
        second = StudyParticipant(
            study_id=study.id,
            participant_name="Harper",
            region="APAC",
            persona="Designer",
            started_at=datetime(2025, 3, 2, 9, 0),
            created_at=datetime(2025, 3, 2, 8, 0),
        )
        session.add(first)
        session.add(second)
        session.commit()
        session.refresh(comparison)
        session.refresh(first)
        session.refresh(second)
        session.add(
            Evaluation(
                study_id=study.id,
                comparison_id=comparison.id,
                study_participant_id=first.id,
                status="submitted",
                rating=4,
                submitted_at=datetime(2025, 3, 3, 12, 30),
            )
        )
        session.add(
            Evaluation(
                study_id=study.id,
                comparison_id=comparison.id,
                study_participant_id=second.id,
                status="draft",
                rating=1,
                submitted_at=datetime(2025, 3, 4, 12, 30),
            )
        )
        session.commit()

        study_id, artifact_id, first_id = study.id, artifact.id, first.id
        snapshot = build_study_snapshot(session, study_id)

    assert snapshot.id == str(study_id)
    assert snapshot.study_code == f"STD-{study_id:03d}"
    assert snapshot.principal_investigator == "Researcher"
    assert snapshot.artifacts == (ArtifactRef(id=str(artifact_id), name="A: Sorting"),)

    rated, idle = snapshot.participants
    assert rated.name == f"Participant {first_id}"
    assert rated.region == "Unknown"
    assert rated.persona == "Participant"
    assert rated.joined_at == "2025-03-01T08:00:00.000Z"
    assert rated.completed_at == "2025-03-03T12:30:00.000Z"
    assert rated.progress == 100
    assert len(rated.ratings) == 1
    assert rated.ratings[0].artifact_id == str(artifact_id)
    assert rated.ratings[0].rating == 4.0

    assert idle.name == "Harper"
    assert idle.joined_at == "2025-03-02T09:00:00.000Z"
    assert idle.completed_at is None
    assert idle.ratings == ()
