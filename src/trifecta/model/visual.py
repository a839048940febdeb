# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, TypedDict, Union

# RGBA, each channel 0..255
Color = tuple[int, int, int, int]

FontWeight = Literal[400, 700]

# Pillow text anchors: horizontal (l, m, r) + vertical (a, m, s, d)
TextAnchor = Literal["la", "ma", "ra", "lm", "mm", "rm", "ls", "ms", "rs"]


class RectNode(TypedDict):
    kind: Literal["rect"]
    x: float
    y: float
    width: float
    height: float
    fill: Color
    radius: NotRequired[float]
    outline: NotRequired[Color]
    outline_width: NotRequired[int]


class CircleNode(TypedDict):
    kind: Literal["circle"]
    cx: float
    cy: float
    r: float
    fill: Color
    outline: NotRequired[Color]
    outline_width: NotRequired[int]


class PieNode(TypedDict):
    """A filled circular sector; angles in degrees, 0 at 3 o'clock, clockwise."""

    kind: Literal["pie"]
    cx: float
    cy: float
    r: float
    start_angle: float
    end_angle: float
    fill: Color


class RingNode(TypedDict):
    """A stroked circle drawn with the stroke-dasharray technique.

    The visible stroke covers ``dash_array - dash_offset`` of the circumference,
    starting at ``start_angle`` and running clockwise.
    """

    kind: Literal["ring"]
    cx: float
    cy: float
    r: float
    stroke: Color
    stroke_width: int
    dash_array: float
    dash_offset: float
    start_angle: float


class PolylineNode(TypedDict):
    kind: Literal["polyline"]
    points: list[tuple[float, float]]
    stroke: Color
    stroke_width: int


class TextNode(TypedDict):
    kind: Literal["text"]
    x: float
    y: float
    text: str
    size: int
    weight: FontWeight
    fill: Color
    anchor: TextAnchor
    strikethrough: NotRequired[bool]


Node = Union[RectNode, CircleNode, PieNode, RingNode, PolylineNode, TextNode]


class Canvas(TypedDict):
    width: int
    height: int
    background: Color
    nodes: list[Node]
