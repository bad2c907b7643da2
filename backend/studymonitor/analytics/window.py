# SPDX-License-Identifier: Apache-2.0
"""Time window resolution.

Windows cover whole UTC calendar days: the requested start is truncated to
00:00 and the requested end is pushed to the last microsecond of its day, so
events stamped on the "to" day still count.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone

from studymonitor.core.exceptions import InvalidFilterError, InvertedRangeError

DAY = timedelta(days=1)


def parse_timestamp(value) -> datetime | None:
    """Parse an ISO-8601 date or datetime into an aware UTC datetime. None when unparseable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        moment = value
    else:
        try:
            moment = datetime.fromisoformat(str(value).strip())
        except ValueError:
            return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def to_iso(moment: datetime) -> str:
    """UTC ISO string with millisecond precision and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def start_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.min, tzinfo=timezone.utc)


def end_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.max, tzinfo=timezone.utc)


def day_key(moment: datetime) -> str:
    return moment.date().isoformat()


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: datetime

    def moment_within(self, value) -> datetime | None:
        """Parsed timestamp when it falls inside the window (inclusive), else None."""
        moment = parse_timestamp(value)
        if moment is None or not self.start <= moment <= self.end:
            return None
        return moment

    def contains(self, value) -> bool:
        return self.moment_within(value) is not None

    def days(self) -> list[str]:
        """Calendar days covered by the window, stepping in fixed 24h ticks."""
        cursor = start_of_day(self.start)
        last = start_of_day(self.end)
        days = []
        while cursor <= last:
            days.append(day_key(cursor))
            cursor += DAY
        return days

    def serialize(self) -> dict:
        return {"from": to_iso(self.start), "to": to_iso(self.end)}


def _parse_filter(value: str | None, fallback: datetime) -> datetime:
    if value is None or not str(value).strip():
        return fallback
    parsed = parse_timestamp(value)
    if parsed is None:
        raise InvalidFilterError()
    return parsed


def resolve_window(
    from_value: str | None,
    to_value: str | None,
    *,
    now: datetime,
    default_window_days: int = 30,
) -> TimeWindow:
    """Turn optional query strings into a concrete window. Raises InvalidFilterError / InvertedRangeError."""
    now = parse_timestamp(now)
    to_raw = _parse_filter(to_value, now)
    from_raw = _parse_filter(from_value, to_raw - timedelta(days=default_window_days))
    window = TimeWindow(start=start_of_day(from_raw), end=end_of_day(to_raw))
    if window.start > window.end:
        raise InvertedRangeError()
    return window
