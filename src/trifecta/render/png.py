# SPDX-License-Identifier: MIT

import io
from functools import lru_cache
from typing import Optional, TypedDict

from PIL import Image, ImageDraw, ImageFont

from trifecta.model.visual import Canvas, FontWeight, Node, RingNode, TextNode

# Draw at this multiple of the target size, then downsample for anti-aliasing
SUPERSAMPLE = 2
# Larger targets are drawn at 1x
MAX_SUPERSAMPLED_PIXELS = 4096 * 4096

FontType = ImageFont.FreeTypeFont | ImageFont.ImageFont


class FontSet(TypedDict):
    regular: Optional[str]  # weight 400
    bold: Optional[str]  # weight 700


class RenderError(Exception):
    pass


DEFAULT_FONTS: FontSet = {"regular": None, "bold": None}


def render_to_png(
    canvas: Canvas, width: int, height: int, fonts: FontSet = DEFAULT_FONTS
) -> bytes:
    """
    Rasterize a composed canvas to PNG bytes of exactly ``width`` x ``height``.

    Raises:
        RenderError: if a font cannot be loaded or Pillow fails to draw/encode
    """
    if width <= 0 or height <= 0:
        raise RenderError(f"Image dimensions must be positive, got {width}x{height}")

    try:
        image = rasterize(canvas, width, height, fonts)
        buffer = io.BytesIO()
        image.save(buffer, format="PNG", optimize=True)
    except (OSError, ValueError) as e:
        raise RenderError(f"Could not render {width}x{height} image: {e}") from e
    return buffer.getvalue()


def get_supersample(width: int, height: int) -> int:
    if width * height * SUPERSAMPLE**2 > MAX_SUPERSAMPLED_PIXELS:
        return 1
    return SUPERSAMPLE


def rasterize(canvas: Canvas, width: int, height: int, fonts: FontSet) -> Image.Image:
    supersample = get_supersample(width, height)
    factor_x = width / canvas["width"] * supersample
    factor_y = height / canvas["height"] * supersample
    factor = min(factor_x, factor_y)

    background = canvas["background"]
    image = Image.new(
        "RGB", (width * supersample, height * supersample), background[:3]
    )
    draw = ImageDraw.Draw(image, "RGBA")

    for node in canvas["nodes"]:
        _draw_node(draw, node, factor, fonts)

    if supersample == 1:
        return image
    return image.resize((width, height), Image.Resampling.LANCZOS)


def _draw_node(
    draw: ImageDraw.ImageDraw, node: Node, factor: float, fonts: FontSet
) -> None:
    if node["kind"] == "rect":
        x0, y0 = node["x"] * factor, node["y"] * factor
        x1 = x0 + node["width"] * factor
        y1 = y0 + node["height"] * factor
        if x1 <= x0 or y1 <= y0:
            return
        outline = node.get("outline")
        draw.rounded_rectangle(
            (x0, y0, x1, y1),
            radius=node.get("radius", 0) * factor,
            fill=node["fill"],
            outline=outline,
            width=_stroke(node.get("outline_width", 1), factor) if outline else 0,
        )
    elif node["kind"] == "circle":
        r = node["r"] * factor
        if r <= 0:
            return
        cx, cy = node["cx"] * factor, node["cy"] * factor
        outline = node.get("outline")
        draw.ellipse(
            (cx - r, cy - r, cx + r, cy + r),
            fill=node["fill"],
            outline=outline,
            width=_stroke(node.get("outline_width", 1), factor) if outline else 0,
        )
    elif node["kind"] == "pie":
        r = node["r"] * factor
        sweep = node["end_angle"] - node["start_angle"]
        if r <= 0 or sweep <= 0:
            return
        cx, cy = node["cx"] * factor, node["cy"] * factor
        bbox = (cx - r, cy - r, cx + r, cy + r)
        if sweep >= 360:
            draw.ellipse(bbox, fill=node["fill"])
        else:
            draw.pieslice(
                bbox, node["start_angle"], node["end_angle"], fill=node["fill"]
            )
    elif node["kind"] == "ring":
        _draw_ring(draw, node, factor)
    elif node["kind"] == "polyline":
        points = [(x * factor, y * factor) for x, y in node["points"]]
        draw.line(
            points,
            fill=node["stroke"],
            width=_stroke(node["stroke_width"], factor),
            joint="curve",
        )
    elif node["kind"] == "text":
        _draw_text(draw, node, factor, fonts)


def _draw_ring(draw: ImageDraw.ImageDraw, node: RingNode, factor: float) -> None:
    dash_array = node["dash_array"]
    if dash_array <= 0:
        return
    visible = max(0.0, min(1.0, (dash_array - node["dash_offset"]) / dash_array))
    if visible <= 0:
        return

    stroke_width = _stroke(node["stroke_width"], factor)
    # Pillow strokes inward from the bounding box, so pad it by half a stroke
    r = node["r"] * factor + stroke_width / 2
    cx, cy = node["cx"] * factor, node["cy"] * factor
    bbox = (cx - r, cy - r, cx + r, cy + r)

    if visible >= 1:
        draw.ellipse(bbox, outline=node["stroke"], width=stroke_width)
        return
    start = node["start_angle"]
    draw.arc(bbox, start, start + 360 * visible, fill=node["stroke"], width=stroke_width)


def _draw_text(
    draw: ImageDraw.ImageDraw, node: TextNode, factor: float, fonts: FontSet
) -> None:
    if not node["text"]:
        return
    font = load_font(fonts, node["weight"], max(1, round(node["size"] * factor)))
    position = (node["x"] * factor, node["y"] * factor)
    draw.text(position, node["text"], font=font, fill=node["fill"], anchor=node["anchor"])

    if node.get("strikethrough"):
        left, top, right, bottom = draw.textbbox(
            position, node["text"], font=font, anchor=node["anchor"]
        )
        middle = (top + bottom) / 2
        draw.line(
            [(left, middle), (right, middle)],
            fill=node["fill"],
            width=max(1, round(node["size"] * factor / 14)),
        )


def _stroke(width: float, factor: float) -> int:
    return max(1, round(width * factor))


def load_font(fonts: FontSet, weight: FontWeight, size: int) -> FontType:
    path = fonts["bold"] if weight == 700 else fonts["regular"]
    return _load_font(path, size)


@lru_cache(maxsize=128)
def _load_font(path: Optional[str], size: int) -> FontType:
    if path is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(path, size)
