# SPDX-License-Identifier: MIT

from typing import Callable

import pendulum

from trifecta.model.view import PeriodType, Progress
from trifecta.time import SECONDS_PER_DAY, days_in_year, seconds_since_midnight


def format_percentage(percentage: float) -> str:
    return f"{percentage:.2f}"


def _progress(period: PeriodType, elapsed: int, total: int) -> Progress:
    percentage = (elapsed / total) * 100 if total > 0 else 0.0
    return {
        "period": period,
        "elapsed": elapsed,
        "total": total,
        "remaining": total - elapsed,
        "percentage": percentage,
        "label": format_percentage(percentage),
    }


def get_year_progress(now: pendulum.DateTime) -> Progress:
    """Whole days of the year elapsed, today included."""
    return _progress("year", now.day_of_year, days_in_year(now))


def get_month_progress(now: pendulum.DateTime) -> Progress:
    """Whole days of the month elapsed, today included."""
    return _progress("month", now.day, now.days_in_month)


def get_day_progress(now: pendulum.DateTime) -> Progress:
    """Wall-clock seconds since local midnight out of a 24 hour day."""
    return _progress("day", seconds_since_midnight(now), SECONDS_PER_DAY)


PERIOD_PROGRESS: dict[PeriodType, Callable[[pendulum.DateTime], Progress]] = {
    "year": get_year_progress,
    "month": get_month_progress,
    "day": get_day_progress,
}


def get_period_progress(now: pendulum.DateTime, period: PeriodType) -> Progress:
    return PERIOD_PROGRESS[period](now)
