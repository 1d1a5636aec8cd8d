"""Python DSL for building scenes by hand.

Scenes normally come from a layout engine; the DSL is for tests, fixtures
and hand-drawn symbols.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Literal

from .colors import BLACK, WHITE, Color
from .models import (
    Circle,
    Hexagon,
    HAlign,
    OutputOptions,
    Rectangle,
    Scene,
    TextLabel,
    Vector,
)
from .symbology import Symbology

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

# Type alias for the halign parameter
HAlignLiteral = Literal["start", "middle", "end"]

# Context stack for nested scene creation
_scene_stack: list[Scene] = []


def _current_vector() -> Vector:
    """Get the geometry of the innermost open scene."""
    if not _scene_stack:
        raise RuntimeError("Shapes can only be added inside a 'with scene(...)' block")
    vector = _scene_stack[-1].vector
    assert vector is not None
    return vector


def _parse_colour(value: Color | str) -> Color:
    """Accept a Color or a hex string."""
    if isinstance(value, Color):
        return value
    return Color.from_hex(value)


def _parse_halign(value: HAlignLiteral | HAlign) -> HAlign:
    """Convert string literal to HAlign enum."""
    if isinstance(value, HAlign):
        return value
    if value == "start":
        return HAlign.LEFT
    if value == "end":
        return HAlign.RIGHT
    return HAlign.CENTRE


@contextmanager
def scene(
        width: float,
        height: float,
        symbology: Symbology = Symbology.CODE128,
        foreground: Color | str = BLACK,
        background: Color | str = WHITE,
        options: OutputOptions | Iterable[str] = OutputOptions(0),
) -> Generator[Scene]:
    """Create a scene context.

    Usage:
        with scene(width=100, height=50) as s:
            rect(0, 0, 2, 40)
            rect(4, 0, 1, 40)
            text(50, 48, "12345", fsize=8)
        svg = render_to_svg(s)

        # Colours as hex strings, options by name:
        with scene(60, 60, Symbology.MAXICODE, foreground="000080",
                   options=["embed-vector-font"]) as s:
            hexagon(10, 10, 1.5)
            circle(30, 30, 8, width=1)

    Args:
        width: Canvas width
        height: Canvas height
        symbology: Symbology the geometry represents
        foreground: Foreground colour, Color or "RRGGBB[AA]"
        background: Background colour, Color or "RRGGBB[AA]"
        options: OutputOptions flags, or their names

    Yields:
        The Scene object, with its geometry filled in as shapes are added
    """
    if not isinstance(options, OutputOptions):
        options = OutputOptions.from_names(options)

    s = Scene(
        symbology=symbology,
        foreground=_parse_colour(foreground),
        background=_parse_colour(background),
        output_options=options,
        vector=Vector(width=width, height=height),
    )
    _scene_stack.append(s)

    try:
        yield s
    finally:
        _scene_stack.pop()


def rect(
        x: float,
        y: float,
        width: float,
        height: float,
        colour: int | None = None,
) -> Rectangle:
    """Add a rectangle; ``colour`` is a palette code 1-8 or None for foreground."""
    r = Rectangle(x=x, y=y, width=width, height=height, colour=colour)
    _current_vector().rectangles.append(r)
    return r


def hexagon(x: float, y: float, diameter: float, rotation: int = 0) -> Hexagon:
    """Add a hexagon centred on (x, y)."""
    h = Hexagon(x=x, y=y, diameter=diameter, rotation=rotation)
    _current_vector().hexagons.append(h)
    return h


def circle(
        x: float,
        y: float,
        diameter: float,
        width: float = 0.0,
        use_background: bool = False,
) -> Circle:
    """Add a disc, or a ring of stroke ``width`` when width is non-zero."""
    c = Circle(x=x, y=y, diameter=diameter, width=width, use_background=use_background)
    _current_vector().circles.append(c)
    return c


def text(
        x: float,
        y: float,
        content: str,
        fsize: float,
        halign: HAlignLiteral | HAlign = "middle",
        rotation: float = 0,
) -> TextLabel:
    """Add a text label.

    Usage:
        text(50, 48, "ABC-123", fsize=8)
        text(2, 48, "<", fsize=8, halign="start")
        text(90, 25, "SIDE", fsize=6, rotation=90)
    """
    t = TextLabel(
        x=x,
        y=y,
        text=content,
        fsize=fsize,
        halign=_parse_halign(halign),
        rotation=rotation,
    )
    _current_vector().strings.append(t)
    return t
