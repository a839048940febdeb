# SPDX-License-Identifier: MIT

import logging
import re
from typing import Optional

import pendulum

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60
DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_in_tz(tz: str) -> pendulum.DateTime:
    return pendulum.now(tz)


def resolve_now(tz: Optional[str]) -> pendulum.DateTime:
    """Current wall-clock time in ``tz``, or local time when ``tz`` is unusable."""
    if not tz:
        return pendulum.now("local")
    try:
        return now_in_tz(tz)
    except (ValueError, LookupError, OSError):
        logger.warning("Unknown timezone %r, falling back to local time", tz)
        return pendulum.now("local")


def date_key(datetime: pendulum.DateTime) -> str:
    """Format a datetime as the 'YYYY-MM-DD' key used for daily todo files."""
    return datetime.format("YYYY-MM-DD")


def is_date_key(value: str) -> bool:
    if not DATE_KEY_PATTERN.match(value):
        return False
    year, month, day = map(int, value.split("-"))
    try:
        pendulum.date(year, month, day)
    except ValueError:
        return False
    return True


def days_in_year(datetime: pendulum.DateTime) -> int:
    return 366 if datetime.is_leap_year() else 365


def seconds_since_midnight(datetime: pendulum.DateTime) -> int:
    return datetime.hour * 3600 + datetime.minute * 60 + datetime.second


def time_to_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("HH:mm")


def month_to_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("MMMM YYYY").upper()
