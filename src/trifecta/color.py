# SPDX-License-Identifier: MIT

import colorsys
from typing import Optional, TypedDict

from trifecta.model.todo import CATEGORIES, Category, TrifectaCompletion
from trifecta.model.visual import Color

# Palette shared by all views
BACKGROUND_COLOR: Color = (26, 26, 26, 255)  # #1a1a1a
PAST_COLOR: Color = (255, 255, 255, 255)
TODAY_COLOR: Color = (231, 111, 81, 255)  # #e76f51
FUTURE_COLOR: Color = (51, 51, 51, 255)  # #333333
DEADLINE_COLOR: Color = (255, 59, 48, 255)  # #ff3b30
TEXT_COLOR: Color = (255, 255, 255, 255)
MUTED_TEXT_COLOR: Color = (153, 153, 153, 255)  # #999999
QUOTE_TEXT_COLOR: Color = (204, 204, 204, 255)  # #cccccc
CHECKBOX_BORDER_COLOR: Color = (102, 102, 102, 255)  # #666666
CARD_FILL_COLOR: Color = (255, 255, 255, 8)  # white at 3%
CARD_BORDER_COLOR: Color = (255, 255, 255, 26)  # white at 10%
BADGE_FILL_COLOR: Color = (26, 26, 26, 217)  # background at 85%

# Returned for empty or zero completion
DIM_COLOR: Color = (255, 255, 255, 13)  # white at 5%

# Base colors for blending, one per category
CATEGORY_BASE_RGB: dict[Category, tuple[int, int, int]] = {
    "work": (0, 255, 135),  # #00ff87
    "fitness": (255, 27, 107),  # #ff1b6b
    "mind": (0, 97, 255),  # #0061ff
}

# Total completed tasks at which a blended dot reaches full intensity
BLEND_SATURATION_CAP = 10


class HslAnchor(TypedDict):
    hue: int
    saturation_start: int
    saturation_end: int
    lightness_start: int
    lightness_end: int


CATEGORY_HSL_ANCHORS: dict[Category, HslAnchor] = {
    "work": {
        "hue": 152,
        "saturation_start": 60,
        "saturation_end": 100,
        "lightness_start": 25,
        "lightness_end": 50,
    },
    "fitness": {
        "hue": 339,
        "saturation_start": 60,
        "saturation_end": 100,
        "lightness_start": 30,
        "lightness_end": 55,
    },
    "mind": {
        "hue": 217,
        "saturation_start": 60,
        "saturation_end": 100,
        "lightness_start": 25,
        "lightness_end": 50,
    },
}


class BlendedColor(TypedDict):
    color: Color
    intensity: float  # 0..1
    total_done: int
    is_empty: bool


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def hsl_to_rgba(hue: float, saturation: float, lightness: float) -> Color:
    """
    Convert HSL to an opaque RGBA tuple.

    Args:
        hue: Hue in degrees [0, 360)
        saturation: Saturation in percent [0, 100]
        lightness: Lightness in percent [0, 100]
    """
    # colorsys uses HLS order with every component in [0, 1]
    r, g, b = colorsys.hls_to_rgb(
        (hue % 360) / 360.0, lightness / 100.0, saturation / 100.0
    )
    return (round(r * 255), round(g * 255), round(b * 255), 255)


def hsl_for(percentage: float, category: Category) -> tuple[int, int, int]:
    """
    Interpolate a category's (hue, saturation %, lightness %) for a completion percentage.

    Saturation and lightness move linearly from the category's low anchor
    (0%) to its high anchor (100%); the hue is fixed per category.
    """
    anchor = CATEGORY_HSL_ANCHORS[category]
    p = clamp_unit(percentage / 100)

    s_start, s_end = anchor["saturation_start"], anchor["saturation_end"]
    l_start, l_end = anchor["lightness_start"], anchor["lightness_end"]

    saturation = round(s_start + (s_end - s_start) * p)
    lightness = round(l_start - (l_start - l_end) * p)
    return (anchor["hue"], saturation, lightness)


def color_for(percentage: float, category: Category) -> Color:
    if percentage <= 0:
        return DIM_COLOR
    return hsl_to_rgba(*hsl_for(percentage, category))


def get_trifecta_colors(
    completion: Optional[TrifectaCompletion],
) -> dict[Category, Color]:
    if completion is None:
        return {category: DIM_COLOR for category in CATEGORIES}
    return {
        category: color_for(completion[category]["percentage"], category)
        for category in CATEGORIES
    }


def get_blended_color(completion: Optional[TrifectaCompletion]) -> BlendedColor:
    """
    Mix the category base colors weighted by each category's share of completed tasks.

    Intensity grows with the number of completed tasks and saturates at
    BLEND_SATURATION_CAP.
    """
    empty: BlendedColor = {
        "color": DIM_COLOR,
        "intensity": 0.0,
        "total_done": 0,
        "is_empty": True,
    }
    if completion is None:
        return empty

    total_done = sum(max(0, completion[category]["done"]) for category in CATEGORIES)
    if total_done == 0:
        return empty

    r = g = b = 0.0
    for category in CATEGORIES:
        share = clamp_unit(max(0, completion[category]["done"]) / total_done)
        base_r, base_g, base_b = CATEGORY_BASE_RGB[category]
        r += base_r * share
        g += base_g * share
        b += base_b * share

    return {
        "color": (round(r), round(g), round(b), 255),
        "intensity": clamp_unit(total_done / BLEND_SATURATION_CAP),
        "total_done": total_done,
        "is_empty": False,
    }


def with_alpha(color: Color, alpha: float) -> Color:
    """Return ``color`` with its alpha channel scaled by ``alpha`` (0..1)."""
    return (color[0], color[1], color[2], round(color[3] * clamp_unit(alpha)))
