# SPDX-License-Identifier: MIT

import pendulum

from trifecta.time import (
    date_key,
    is_date_key,
    month_to_display_str,
    resolve_now,
    seconds_since_midnight,
    time_to_display_str,
)


def test_resolve_now_in_timezone() -> None:
    now = resolve_now("Europe/Paris")

    assert now.timezone_name == "Europe/Paris"


def test_resolve_now_falls_back_to_local_time() -> None:
    assert isinstance(resolve_now("Not/AZone"), pendulum.DateTime)
    assert isinstance(resolve_now(""), pendulum.DateTime)
    assert isinstance(resolve_now(None), pendulum.DateTime)


def test_resolve_now_survives_unloadable_timezone_names() -> None:
    # Longer than any file name the zoneinfo lookup can open
    assert isinstance(resolve_now("a" * 300), pendulum.DateTime)


def test_date_keys() -> None:
    dt = pendulum.datetime(2024, 2, 9, 23, 59)

    assert date_key(dt) == "2024-02-09"
    assert is_date_key("2024-02-29") is True
    assert is_date_key("2023-02-29") is False
    assert is_date_key("2024-2-9") is False
    assert is_date_key("notes") is False


def test_display_strings() -> None:
    dt = pendulum.datetime(2024, 6, 15, 7, 5, 30)

    assert time_to_display_str(dt) == "07:05"
    assert month_to_display_str(dt) == "JUNE 2024"
    assert seconds_since_midnight(dt) == 7 * 3600 + 5 * 60 + 30
