# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Strict calendar-date parsing.

Only `YYYY-MM-DD` with exactly four, two and two digits is accepted. Dates that do
not exist (for example `2023-02-30`) are rejected rather than rolled over, and so
are dates after "today".
"""
from __future__ import annotations

import re
from datetime import date, datetime, tzinfo

from dateutil import tz

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def today_in(zone: tzinfo | None = None) -> date:
    """Return the current date in `zone`, or in the local zone when omitted."""
    return datetime.now(zone or tz.tzlocal()).date()


def parse_strict_date(text: str, today: date | None = None) -> date:
    """
    Parse a strict `YYYY-MM-DD` date that is not in the future.

    Args:
        text (str): The date text; surrounding whitespace is ignored.
        today (date | None): Reference date. Defaults to the local current date.

    Returns:
        date: The parsed date.

    Raises:
        ValueError: If the format is wrong, the date does not exist, or it is
            later than `today`.
    """
    text = text.strip()
    if not DATE_PATTERN.fullmatch(text):
        raise ValueError(f"'{text}' does not match YYYY-MM-DD")
    parsed = datetime.strptime(text, DATE_FORMAT).date()
    if parsed > (today or today_in()):
        raise ValueError(f"{parsed.isoformat()} is in the future")
    return parsed
