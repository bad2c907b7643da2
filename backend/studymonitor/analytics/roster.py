# SPDX-License-Identifier: Apache-2.0
"""Roster filtering: participant filter plus join-date eligibility."""
from __future__ import annotations

from studymonitor.analytics.snapshot import ParticipantSnapshot
from studymonitor.analytics.window import TimeWindow, parse_timestamp

ALL_PARTICIPANTS = "all"


def normalize_participant_id(value) -> str | None:
    """None means no filter; "all" and blanks are treated the same way."""
    if value is None:
        return None
    value = str(value).strip()
    if not value or value == ALL_PARTICIPANTS:
        return None
    return value


def filter_roster(
    participants: tuple[ParticipantSnapshot, ...] | list[ParticipantSnapshot],
    participant_id: str | None,
    window: TimeWindow,
) -> tuple[ParticipantSnapshot, ...]:
    """Participants matching the filter who joined on or before the window end."""
    roster = []
    for participant in participants:
        if participant_id is not None and participant.id != participant_id:
            continue
        joined_at = parse_timestamp(participant.joined_at)
        if joined_at is None or joined_at > window.end:
            continue
        roster.append(participant)
    return tuple(roster)
