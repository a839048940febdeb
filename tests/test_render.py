# SPDX-License-Identifier: MIT

import io
from pathlib import Path

import pendulum
import pytest
from PIL import Image

from trifecta.configuration import Configuration
from trifecta.model.view import ViewKind
from trifecta.render.png import (
    MAX_SUPERSAMPLED_PIXELS,
    SUPERSAMPLE,
    RenderError,
    get_supersample,
    render_to_png,
)
from trifecta.repository.todo import TodoRepository
from trifecta.service.quote import QuoteClient
from trifecta.service.wallpaper import build_view_data, render_wallpaper
from trifecta.view.dispatch import compose_view, empty_view_data

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _open(png: bytes) -> Image.Image:
    return Image.open(io.BytesIO(png))


@pytest.mark.parametrize("kind", list(ViewKind))
def test_render_every_view(kind: ViewKind, mid_june: pendulum.DateTime) -> None:
    params = {"date": mid_june, "width": 300, "height": 600}
    canvas = compose_view(kind, params, empty_view_data())  # type: ignore[arg-type]

    png = render_to_png(canvas, 300, 600)

    assert png.startswith(PNG_SIGNATURE)
    image = _open(png)
    assert image.size == (300, 600)
    # Background is #1a1a1a in the top left corner
    assert image.convert("RGB").getpixel((0, 0)) == (26, 26, 26)


def test_render_rejects_bad_font(mid_june: pendulum.DateTime) -> None:
    params = {"date": mid_june, "width": 300, "height": 600}
    canvas = compose_view(ViewKind.DAY, params, empty_view_data())  # type: ignore[arg-type]

    with pytest.raises(RenderError):
        render_to_png(canvas, 300, 600, {"regular": "/no/such/font.ttf", "bold": None})


def test_render_rejects_empty_size(mid_june: pendulum.DateTime) -> None:
    params = {"date": mid_june, "width": 300, "height": 600}
    canvas = compose_view(ViewKind.YEARLY, params, empty_view_data())  # type: ignore[arg-type]

    with pytest.raises(RenderError):
        render_to_png(canvas, 0, 600)


def test_render_wallpaper_pipeline(
    isolated_config: Configuration,
    repository: TodoRepository,
    todos_dir: Path,
    mid_june: pendulum.DateTime,
) -> None:
    (todos_dir / "2024-06-15.md").write_text(
        "## Work\n- [x] A\n- [ ] B\n## Mind\n- [ ] read\n", encoding="utf-8"
    )

    for view in ("year", "month", "day"):
        png = render_wallpaper(
            isolated_config, repository, width=200, height=400, view=view, now=mid_june
        )
        assert _open(png).size == (200, 400)


def test_render_wallpaper_defaults_to_configured_size(
    isolated_config: Configuration, repository: TodoRepository
) -> None:
    isolated_config["default_width"] = 120
    isolated_config["default_height"] = 240

    png = render_wallpaper(isolated_config, repository, tz="Not/AZone")

    assert _open(png).size == (120, 240)


def test_supersampling_is_skipped_for_huge_images() -> None:
    assert get_supersample(1179, 2556) == SUPERSAMPLE
    assert get_supersample(4096, 4096) == 1
    assert 4096 * 4096 <= MAX_SUPERSAMPLED_PIXELS


class CountingQuoteClient(QuoteClient):
    def __init__(self) -> None:
        super().__init__("https://quotes.example/api/random")
        self.fetches = 0

    def get_quote(self):  # type: ignore[override]
        self.fetches += 1
        return {"quote": "Counted.", "author": "Test"}


def test_long_checklist_skips_the_quote_fetch(
    isolated_config: Configuration,
    repository: TodoRepository,
    todos_dir: Path,
    mid_june: pendulum.DateTime,
) -> None:
    isolated_config["fetch_quotes"] = True
    client = CountingQuoteClient()
    (todos_dir / "2024-06-15.md").write_text(
        "".join(f"- [ ] task {i}\n" for i in range(4)), encoding="utf-8"
    )

    data = build_view_data(ViewKind.DAY, mid_june, isolated_config, repository, client)

    assert data["quote"] is None
    assert data["todos"] is not None
    assert client.fetches == 0


def test_short_checklist_fetches_the_quote(
    isolated_config: Configuration,
    repository: TodoRepository,
    todos_dir: Path,
    mid_june: pendulum.DateTime,
) -> None:
    isolated_config["fetch_quotes"] = True
    client = CountingQuoteClient()
    (todos_dir / "2024-06-15.md").write_text("- [ ] task\n", encoding="utf-8")

    data = build_view_data(ViewKind.DAY, mid_june, isolated_config, repository, client)

    assert data["quote"] == {"quote": "Counted.", "author": "Test"}
    assert client.fetches == 1
