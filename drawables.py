"""Renderer-agnostic shapes derived from the current game state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Union


@dataclass(frozen=True)
class Circle:
    """Filled circle centred on ``(x, y)``."""

    x: float
    y: float
    radius: float
    color: str


@dataclass(frozen=True)
class Rect:
    """Filled axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float
    color: str


Drawable = Union[Circle, Rect]


def project(player, obstacles: Iterable) -> List[Drawable]:
    """Map the player and active obstacles to a list of shapes.

    Each obstacle yields two rectangles, the solid segments left and right of
    its gate. A gate that runs past the canvas edge produces a right segment
    with non-positive width, which renderers skip.
    """
    shapes: List[Drawable] = [Circle(player.x, player.y, player.radius, player.color)]
    for o in obstacles:
        gate_end = o.gap_position + o.gap_width
        shapes.append(Rect(o.x, o.y, o.gap_position, o.height, o.color))
        shapes.append(Rect(gate_end, o.y, o.width - gate_end, o.height, o.color))
    return shapes
