"""Placing rendered symbols into drawsvg drawings.

The symbol markup always comes from :class:`SvgRenderer`; drawsvg only
positions it, so the symbol itself is byte-identical to standalone output.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import drawsvg as draw

from .errors import MissingGeometryError
from .formatting import format_float
from .renderer import RenderConfig, SvgRenderer

if TYPE_CHECKING:
    from .models import Scene


def barcode_group(
    scene: Scene,
    x: float = 0,
    y: float = 0,
    scale: float = 1.0,
    config: RenderConfig | None = None,
) -> draw.Group:
    """Wrap a rendered symbol in a group placed at (x, y).

    Usage:
        d = draw.Drawing(400, 200)
        d.append(barcode_group(label_scene, x=20, y=30, scale=0.5))
        d.save_svg("label.svg")

    Args:
        scene: The scene to render
        x: Left edge of the symbol in the drawing
        y: Top edge of the symbol in the drawing
        scale: Uniform scale applied to the symbol
        config: Optional output configuration

    Returns:
        A drawsvg Group holding the symbol markup
    """
    renderer = SvgRenderer(config)
    markup = renderer.render_style(scene) + renderer.render_body(scene)

    transform = format_float(x, 2, "translate(") + format_float(y, 2, ",") + ")"
    if scale != 1:
        transform += format_float(scale, 3, " scale(") + ")"

    group = draw.Group(transform=transform)
    group.append(draw.Raw("\n" + markup))
    return group


def scene_to_drawing(scene: Scene, config: RenderConfig | None = None) -> draw.Drawing:
    """Build a drawsvg Drawing the size of the symbol's canvas."""
    if scene.vector is None:
        raise MissingGeometryError()
    d = draw.Drawing(math.ceil(scene.vector.width), math.ceil(scene.vector.height))
    d.append(barcode_group(scene, config=config))
    return d
