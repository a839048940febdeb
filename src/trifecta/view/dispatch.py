# SPDX-License-Identifier: MIT

from typing import Callable

from trifecta.configuration import TrifectaEncoding
from trifecta.model.view import ViewData, ViewKind, ViewParams
from trifecta.model.visual import Canvas
from trifecta.view.views.day import compose_day_view
from trifecta.view.views.monthly import compose_monthly_view
from trifecta.view.views.yearly import compose_yearly_view

ViewComposer = Callable[[ViewParams, ViewData, TrifectaEncoding], Canvas]

VIEW_COMPOSERS: dict[ViewKind, ViewComposer] = {
    ViewKind.YEARLY: compose_yearly_view,
    ViewKind.MONTHLY: compose_monthly_view,
    ViewKind.DAY: compose_day_view,
}


def empty_view_data() -> ViewData:
    return {"completion_map": None, "todos": None, "quote": None}


def compose_view(
    kind: ViewKind,
    params: ViewParams,
    data: ViewData,
    encoding: TrifectaEncoding = "slices",
) -> Canvas:
    if params["width"] <= 0 or params["height"] <= 0:
        raise ValueError(
            f"View dimensions must be positive, got {params['width']}x{params['height']}"
        )
    return VIEW_COMPOSERS[kind](params, data, encoding)
