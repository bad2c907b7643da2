# SPDX-License-Identifier: Apache-2.0
"""SQLModel table definitions."""
from studymonitor.models.evaluation import Evaluation
from studymonitor.models.participant import StudyParticipant
from studymonitor.models.study import Artifact, Study, StudyArtifact, StudyComparison

__all__ = [
    "Artifact",
    "Evaluation",
    "Study",
    "StudyArtifact",
    "StudyComparison",
    "StudyParticipant",
]
