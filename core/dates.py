# core/dates.py
from __future__ import annotations

from datetime import date, datetime, timedelta

from django.utils import dateformat, timezone
from django.utils.dateparse import parse_date, parse_datetime

DEFAULT_DATE_FORMAT = "d M Y h:iA"

# date.weekday(): Monday == 0
_SUNDAY = 6
_SATURDAY = 5


def parse_date_value(value) -> date | datetime:
    """
    Accepts a date, a datetime, an ISO 8601 string, "now" or None (== now).

    Raises ValueError for strings that are neither an ISO date nor an ISO datetime.
    """
    if value is None:
        return timezone.localtime()
    if isinstance(value, (datetime, date)):
        return value

    text = str(value).strip()
    if text.lower() in {"", "now"}:
        return timezone.localtime()

    parsed = parse_datetime(text) or parse_date(text)
    if parsed is None:
        raise ValueError(f"Unrecognized date value: {value!r}")
    return parsed


def format_date(value, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Format using PHP-style format characters (see django.utils.dateformat)."""
    parsed = parse_date_value(value)
    if isinstance(parsed, datetime):
        return dateformat.format(parsed, fmt)
    return dateformat.format(datetime(parsed.year, parsed.month, parsed.day), fmt)


def x_week_range(value, day) -> str:
    """
    Week boundary for `value` as "YYYY-MM-DD".

    Falsy `day` (including the strings "" and "0") -> the Sunday on or
    before the date (week start), anything else -> the Saturday on or
    after it (week end).
    """
    parsed = parse_date_value(value)
    current = parsed.date() if isinstance(parsed, datetime) else parsed

    if not day or day == "0":
        back = (current.weekday() - _SUNDAY) % 7
        return (current - timedelta(days=back)).isoformat()

    ahead = (_SATURDAY - current.weekday()) % 7
    return (current + timedelta(days=ahead)).isoformat()
