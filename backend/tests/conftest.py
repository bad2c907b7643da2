# SPDX-License-Identifier: Apache-2.0
"""pytest fixtures for backend tests."""
import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="studymonitor-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["ANALYTICS_RATE_LIMIT"] = "10000/minute"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from studymonitor.analytics import ArtifactRef, ParticipantSnapshot, RatingEvent, StudySnapshot  # noqa: E402
from studymonitor.database import create_db_and_tables  # noqa: E402
from studymonitor.main import app  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _tables():
    create_db_and_tables()


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def readability_study():
    """Two participants over 2025-03-01..2025-03-10.

    A rates 4 and 5 on day 3 and completes on day 10; B rates 3 on day 5 and never completes.
    """
    return StudySnapshot(
        id="42",
        title="AI vs. Human Code Readability",
        study_code="ST-42A",
        principal_investigator="Dr. Priya Malhotra",
        start_date="2025-03-01T00:00:00.000Z",
        end_date="2025-03-31T00:00:00.000Z",
        artifacts=(
            ArtifactRef(id="artifact-a", name="AI Snippet - Sorting"),
            ArtifactRef(id="artifact-b", name="Human Snippet - Parsing"),
        ),
        participants=(
            ParticipantSnapshot(
                id="p-a",
                name="Nia Patel",
                region="North America",
                persona="Senior Engineer",
                progress=100,
                joined_at="2025-03-01T09:00:00.000Z",
                completed_at="2025-03-10T16:25:00.000Z",
                ratings=(
                    RatingEvent(artifact_id="artifact-a", rating=4, submitted_at="2025-03-03T12:30:00.000Z"),
                    RatingEvent(artifact_id="artifact-b", rating=5, submitted_at="2025-03-03T15:45:00.000Z"),
                ),
            ),
            ParticipantSnapshot(
                id="p-b",
                name="Marco Alvarez",
                region="Latin America",
                persona="Full-stack Engineer",
                progress=60,
                joined_at="2025-03-01T10:05:00.000Z",
                ratings=(
                    RatingEvent(artifact_id="artifact-a", rating=3, submitted_at="2025-03-05T10:10:00.000Z"),
                ),
            ),
        ),
    )
