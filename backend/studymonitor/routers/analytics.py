# SPDX-License-Identifier: Apache-2.0
"""Monitor dashboard endpoint: time-windowed analytics for one study."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Query, Request

from studymonitor.analytics import build_study_analytics
from studymonitor.config import STUDY_NOT_FOUND_MESSAGE, settings
from studymonitor.core.exceptions import AnalyticsUnavailableError, NotFoundError, StudyMonitorError
from studymonitor.core.security import rate_limit
from studymonitor.database import Session, engine
from studymonitor.services.snapshot_service import build_study_snapshot

router = APIRouter(prefix="", tags=["analytics"])
logger = logging.getLogger("studymonitor")

# Largest id an SQLite INTEGER primary key can hold.
MAX_STUDY_ID = 2**63 - 1


def _parse_study_id(study_id: str) -> int | None:
    if not (study_id.isascii() and study_id.isdigit()):
        return None
    value = int(study_id)
    return value if value <= MAX_STUDY_ID else None


@router.get("/study/{study_id}")
@rate_limit(settings.analytics_rate_limit)
def study_analytics(
    request: Request,
    study_id: str,
    from_date: str | None = Query(None, alias="from"),
    to_date: str | None = Query(None, alias="to"),
    participant_id: str | None = Query(None, alias="participantId"),
):
    """Ratings trend, cumulative completion, artifact averages and participant summaries."""
    try:
        snapshot = None
        numeric_id = _parse_study_id(study_id)
        if numeric_id is not None:
            with Session(engine) as session:
                snapshot = build_study_snapshot(session, numeric_id)
        if snapshot is None:
            raise NotFoundError(STUDY_NOT_FOUND_MESSAGE.format(study_id=study_id))
        analytics = build_study_analytics(
            snapshot,
            from_value=from_date,
            to_value=to_date,
            participant_id=participant_id,
            now=datetime.now(timezone.utc),
            options=settings.analytics_options,
        )
        return analytics.to_dict()
    except StudyMonitorError:
        raise
    except Exception as exc:
        logger.exception("Study analytics error for study %s", study_id)
        raise AnalyticsUnavailableError() from exc
