"""barsvg - SVG output for barcode vector scenes.

Example usage:
    from barsvg import render_to_svg, scene, rect, text

    with scene(width=30, height=20) as s:
        rect(2, 0, 1, 15)
        rect(4, 0, 2, 15)
        text(15, 19, "AB&C", fsize=4)

    svg = render_to_svg(s)
"""

from .colors import (
    BLACK,
    PALETTE,
    WHITE,
    Color,
    palette_colour,
)
from .drawing import (
    barcode_group,
    scene_to_drawing,
)
from .dsl import (
    circle,
    hexagon,
    rect,
    scene,
    text,
)
from .errors import (
    BarSvgError,
    ErrorCode,
    MissingGeometryError,
)
from .fonts import FontAssets
from .formatting import (
    escape_text,
    format_float,
)
from .models import (
    Circle,
    HAlign,
    Hexagon,
    OutputOptions,
    Rectangle,
    Scene,
    TextLabel,
    Vector,
)
from .renderer import (
    RenderConfig,
    SvgRenderer,
    render_to_bytes,
    render_to_svg,
)
from .symbology import Symbology, is_upcean

__version__ = "0.1.0"

__all__ = [
    # DSL functions
    "scene",
    "rect",
    "hexagon",
    "circle",
    "text",
    # Models
    "Scene",
    "Vector",
    "Rectangle",
    "Hexagon",
    "Circle",
    "TextLabel",
    "HAlign",
    "OutputOptions",
    "Symbology",
    "is_upcean",
    # Colours
    "Color",
    "BLACK",
    "WHITE",
    "PALETTE",
    "palette_colour",
    # Formatting
    "format_float",
    "escape_text",
    # Rendering
    "render_to_svg",
    "render_to_bytes",
    "SvgRenderer",
    "RenderConfig",
    "FontAssets",
    # drawsvg integration
    "barcode_group",
    "scene_to_drawing",
    # Errors
    "BarSvgError",
    "ErrorCode",
    "MissingGeometryError",
    # Version
    "__version__",
]
