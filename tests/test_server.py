# SPDX-License-Identifier: MIT

import io
from pathlib import Path

import pendulum
import pytest
from fastapi.testclient import TestClient
from PIL import Image

import trifecta.server.app as server_module
from trifecta.render.png import RenderError
from trifecta.time import date_key

client = TestClient(server_module.app)


def test_wallpaper_png() -> None:
    response = client.get(
        "/api/wallpaper", params={"width": 200, "height": 400, "view": "year"}
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"
    assert Image.open(io.BytesIO(response.content)).size == (200, 400)


def test_day_view_reads_todays_file(todos_dir: Path) -> None:
    today = date_key(pendulum.now("Europe/Paris"))
    (todos_dir / f"{today}.md").write_text("- [x] A\n", encoding="utf-8")

    response = client.get(
        "/api/wallpaper",
        params={"width": 150, "height": 300, "view": "daily", "tz": "Europe/Paris"},
    )

    assert response.status_code == 200


def test_unknown_timezone_still_renders() -> None:
    response = client.get(
        "/api/wallpaper", params={"width": 100, "height": 200, "tz": "Nowhere/Land"}
    )

    assert response.status_code == 200


@pytest.mark.parametrize(
    "params",
    [
        {"width": 0},
        {"height": -5},
        {"width": "wide"},
        {"width": 4097},
        {"height": 20000},
    ],
)
def test_invalid_dimensions_are_rejected(params: dict) -> None:
    assert client.get("/api/wallpaper", params=params).status_code == 422


def test_render_failure_is_a_500(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args, **kwargs):
        raise RenderError("boom")

    monkeypatch.setattr(server_module, "render_wallpaper", fail)

    response = client.get("/api/wallpaper")

    assert response.status_code == 500
    assert response.text == "Error generating wallpaper"


def test_overlong_timezone_falls_back_to_local_time() -> None:
    response = client.get(
        "/api/wallpaper",
        params={"width": 200, "height": 400, "view": "day", "tz": "a" * 300},
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
