"""Opening-hours parsing and "open now" evaluation.

Listings are imported with a compact schedule such as
``"Mon-Fri: 9:00am - 7:00pm, Sat: 9:00am - 5:00pm, Sun: Closed"`` and stored
as a per-day map. Both the parser and the evaluator are tolerant: bad input
degrades to ``Closed`` days (parser) or to *open* (evaluator), never to an
exception.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Mapping

DAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

CLOSED = "Closed"
FULL_DAY = "12:00am - 11:59pm"

ALWAYS_OPEN_TOKENS = frozenset({"24/7", "24/7 booking", "24 hours", "open 24 hours"})

_DAY_ALIASES = {
    "mon": "monday",
    "tue": "tuesday",
    "tues": "tuesday",
    "wed": "wednesday",
    "thu": "thursday",
    "thur": "thursday",
    "thurs": "thursday",
    "fri": "friday",
    "sat": "saturday",
    "sun": "sunday",
}
_DAY_ALIASES.update({day: day for day in DAYS})

_RANGE_RE = re.compile(
    r"^\s*(\d{1,2}):(\d{2})\s*([ap]m)\s*-\s*(\d{1,2}):(\d{2})\s*([ap]m)\s*$",
    re.IGNORECASE,
)


def normalize_day(token: str) -> str | None:
    """Map ``Mon``/``monday``/``THURS`` to a canonical day name."""
    return _DAY_ALIASES.get(token.strip().lower())


def expand_days(day_spec: str) -> list[str]:
    """Expand ``"Fri-Mon"`` or ``"Sat"`` into day names.

    Ranges walk forward through the week and wrap, so ``Fri-Mon`` is
    Friday, Saturday, Sunday, Monday. Unknown tokens expand to nothing.
    """
    if "-" in day_spec:
        start_token, _, end_token = day_spec.partition("-")
        start, end = normalize_day(start_token), normalize_day(end_token)
        if start is None or end is None:
            return []
        i = DAYS.index(start)
        days = [DAYS[i]]
        while DAYS[i] != end:
            i = (i + 1) % len(DAYS)
            days.append(DAYS[i])
        return days

    day = normalize_day(day_spec)
    return [day] if day else []


def parse_opening_hours(text: str | None) -> dict[str, str]:
    """Convert a compact schedule string into a seven-day map."""
    raw = (text or "").strip()
    if raw.lower() in ALWAYS_OPEN_TOKENS:
        return {day: FULL_DAY for day in DAYS}

    result: dict[str, str] = {}
    for segment in raw.split(", "):
        day_spec, sep, hours_spec = segment.partition(":")
        if not sep:
            continue
        hours = hours_spec.strip()
        if not hours:
            continue
        value = CLOSED if hours.lower() == "closed" else hours
        for day in expand_days(day_spec.strip()):
            result[day] = value

    return {day: result.get(day, CLOSED) for day in DAYS}


def _to_minutes(hour: str, minute: str, meridiem: str) -> int:
    h = int(hour) % 12
    if meridiem.lower() == "pm":
        h += 12
    return h * 60 + int(minute)


def parse_time_range(value: str) -> tuple[int, int] | None:
    """Parse ``"9:00am - 5:30pm"`` into minutes since midnight, or None."""
    match = _RANGE_RE.match(value)
    if not match:
        return None
    start = _to_minutes(*match.group(1, 2, 3))
    end = _to_minutes(*match.group(4, 5, 6))
    return start, end


def is_open_now(hours: Mapping[str, str] | None, day: str, minute_of_day: int) -> bool:
    """Return whether a listing counts as open.

    Missing data and unparseable ranges count as open; only an explicit
    ``Closed`` day or a parsed range not covering ``minute_of_day`` is closed.
    """
    if not hours:
        return True
    today = hours.get(day.lower())
    if not today:
        return True
    if today.strip().lower() == "closed":
        return False
    parsed = parse_time_range(today)
    if parsed is None:
        return True
    start, end = parsed
    return start <= minute_of_day <= end


def is_open_at(hours: Mapping[str, str] | None, when: datetime) -> bool:
    return is_open_now(hours, DAYS[when.weekday()], when.hour * 60 + when.minute)
