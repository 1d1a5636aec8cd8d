"""Path builders for rectangles and hexagons.

Rectangles sharing a colour are merged into one ``<path>`` per run, and all
hexagons share a single ``<path>``, which keeps the output small compared
with one element per shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .colors import palette_colour
from .formatting import close_tag, format_float

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .colors import Color
    from .models import Hexagon, Rectangle

# sqrt(3) / 4: distance from centre to a flat side, per unit diameter
HEXAGON_LONG_RADIUS_FACTOR = 0.43301270189221932338


def _rectangle_subpath(rect: Rectangle) -> str:
    return (
        format_float(rect.x, 2, "M")
        + format_float(rect.y, 2, " ")
        + format_float(rect.width, 2, "h")
        + format_float(rect.height, 2, "v")
        + format_float(rect.width, 2, "h-")
        + "Z"
    )


def _close_path(colour: int | None, foreground: Color) -> str:
    fill = "" if colour is None else f' fill="#{palette_colour(colour)}"'
    return '"' + fill + close_tag(foreground.opacity)


def rectangle_paths(rectangles: Iterable[Rectangle], foreground: Color) -> Iterator[str]:
    """Yield one ``<path>`` element per run of same-coloured rectangles.

    A run ends at every change of colour tag, so callers wanting the fewest
    paths must group rectangles by colour beforehand. Rectangles without a
    palette colour inherit the group fill and get no ``fill`` attribute.

    Args:
        rectangles: Rectangles in drawing order
        foreground: Foreground colour, for the opacity of every path

    Yields:
        Complete ``<path .../>`` lines
    """
    current: int | None = None
    parts: list[str] = []
    for rect in rectangles:
        if parts and rect.colour != current:
            yield "".join(parts) + _close_path(current, foreground)
            parts = []
        if not parts:
            parts.append('  <path d="')
        current = rect.colour
        parts.append(_rectangle_subpath(rect))
    if parts:
        yield "".join(parts) + _close_path(current, foreground)


def _hexagon_vertices(
    x: float, y: float, pointy: bool, radius: float, short: float, long: float
) -> list[tuple[float, float]]:
    if pointy:
        return [
            (x, y + radius),
            (x + long, y + short),
            (x + long, y - short),
            (x, y - radius),
            (x - long, y - short),
            (x - long, y + short),
        ]
    return [
        (x - radius, y),
        (x - short, y + long),
        (x + short, y + long),
        (x + radius, y),
        (x + short, y - long),
        (x - short, y - long),
    ]


def hexagon_path(hexagons: Iterable[Hexagon], foreground: Color) -> str:
    """Build a single ``<path>`` element holding every hexagon.

    Returns an empty string when there are no hexagons.
    """
    parts: list[str] = []
    previous_diameter = radius = short_radius = long_radius = 0.0
    for hexagon in hexagons:
        if hexagon.diameter != previous_diameter:
            previous_diameter = hexagon.diameter
            radius = 0.5 * previous_diameter
            short_radius = 0.25 * previous_diameter
            long_radius = HEXAGON_LONG_RADIUS_FACTOR * previous_diameter
        pointy = hexagon.rotation in (0, 180)
        vertices = _hexagon_vertices(
            hexagon.x, hexagon.y, pointy, radius, short_radius, long_radius
        )
        for i, (vx, vy) in enumerate(vertices):
            parts.append(format_float(vx, 2, "L" if i else "M"))
            parts.append(format_float(vy, 2, " "))
        parts.append("Z")
    if not parts:
        return ""
    return '  <path d="' + "".join(parts) + '"' + close_tag(foreground.opacity)
