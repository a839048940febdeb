# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum
import typer


def parse_datetime(
    datetime_param: Optional[str], tz: str = "local"
) -> Optional[pendulum.DateTime]:
    """
    Parse a --date value into a datetime in ``tz``.

    Accepts 'YYYY-MM-DD' (midnight), 'YYYY-MM-DD HH:mm', 'now'/'n',
    'today'/'t', 'yesterday'/'y', 'tomorrow'/'o' and day offsets like '-1'.
    """
    if datetime_param is None:
        return None

    datetime = datetime_param.strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return cast(pendulum.DateTime, pendulum.parse(datetime, tz=tz))
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        return pendulum.today(tz).add(days=int(datetime))

    if datetime == "now" or datetime == "n":
        return pendulum.now(tz)
    if datetime == "today" or datetime == "t":
        return pendulum.today(tz)
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday(tz)
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow(tz)
    raise typer.BadParameter("Incorrect datetime format")


def parse_month(month_param: Optional[str], tz: str = "local") -> Optional[pendulum.DateTime]:
    """Parse a 'YYYY-MM' value to the first day of that month."""
    if month_param is None:
        return None

    match = re.match(r"^(\d{4})-(\d{1,2})$", month_param.strip())
    if match is None:
        raise typer.BadParameter("Month must be in YYYY-MM format")

    year, month = int(match.group(1)), int(match.group(2))
    if month < 1 or month > 12:
        raise typer.BadParameter(f"Month must be between 1 and 12, got {month}")
    return pendulum.datetime(year, month, 1, tz=tz)
