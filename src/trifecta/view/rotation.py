# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from trifecta.model.view import ViewKind

DEFAULT_ROTATION_INTERVAL_MINUTES = 15

ROTATION_ORDER: tuple[ViewKind, ...] = (ViewKind.YEARLY, ViewKind.MONTHLY, ViewKind.DAY)

VIEW_ALIASES: dict[str, ViewKind] = {
    "yearly": ViewKind.YEARLY,
    "year": ViewKind.YEARLY,
    "monthly": ViewKind.MONTHLY,
    "month": ViewKind.MONTHLY,
    "day": ViewKind.DAY,
    "days": ViewKind.DAY,
    "daily": ViewKind.DAY,
}


def parse_view_param(view: Optional[str]) -> Optional[ViewKind]:
    """Map a ``view`` query value to a view; None when absent or unrecognized."""
    if view is None:
        return None
    return VIEW_ALIASES.get(view.strip().lower())


def get_rotated_view(
    now: pendulum.DateTime,
    interval_minutes: int = DEFAULT_ROTATION_INTERVAL_MINUTES,
) -> ViewKind:
    """Cycle yearly, monthly, day in ``interval_minutes`` slots of the hour."""
    interval = max(1, interval_minutes)
    index = (now.minute // interval) % len(ROTATION_ORDER)
    return ROTATION_ORDER[index]


def select_view(
    now: pendulum.DateTime,
    view: Optional[str],
    interval_minutes: int = DEFAULT_ROTATION_INTERVAL_MINUTES,
) -> ViewKind:
    explicit = parse_view_param(view)
    if explicit is not None:
        return explicit
    return get_rotated_view(now, interval_minutes)
