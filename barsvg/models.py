"""Data models for barcode vector scenes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import TYPE_CHECKING

from .colors import BLACK, WHITE, Color
from .symbology import Symbology, is_upcean

if TYPE_CHECKING:
    from collections.abc import Iterable


class HAlign(IntEnum):
    """Horizontal alignment of a text label about its anchor point."""

    CENTRE = 0
    LEFT = 1
    RIGHT = 2


class OutputOptions(IntFlag):
    """Output option bits, as set on the symbol by the layout engine.

    Only BOLD_TEXT and EMBED_VECTOR_FONT change the SVG output; the other
    bits were consumed by the layout stage and are carried along untouched.
    """

    BARCODE_BIND_TOP = 0x0001
    BARCODE_BIND = 0x0002
    BARCODE_BOX = 0x0004
    BARCODE_STDOUT = 0x0008
    READER_INIT = 0x0010
    SMALL_TEXT = 0x0020
    BOLD_TEXT = 0x0040
    CMYK_COLOUR = 0x0080
    BARCODE_DOTTY_MODE = 0x0100
    GS1_GS_SEPARATOR = 0x0200
    OUT_BUFFER_INTERMEDIATE = 0x0400
    BARCODE_QUIET_ZONES = 0x0800
    BARCODE_NO_QUIET_ZONES = 0x1000
    COMPLIANT_HEIGHT = 0x2000
    EANUPC_GUARD_WHITESPACE = 0x4000
    EMBED_VECTOR_FONT = 0x8000

    @classmethod
    def from_names(cls, names: Iterable[str]) -> OutputOptions:
        """Combine options given by name, e.g. ``["bold-text", "embed_vector_font"]``.

        Names are case-insensitive and accept '-' or '_' as separator;
        "cmyk-color" and "ean-upc-guard-whitespace" are accepted as aliases.
        """
        result = cls(0)
        for name in names:
            key = name.strip().upper().replace("-", "_")
            key = _OPTION_ALIASES.get(key, key)
            try:
                result |= cls[key]
            except KeyError:
                raise ValueError(f"Unknown output option '{name}'") from None
        return result


_OPTION_ALIASES = {
    "CMYK_COLOR": "CMYK_COLOUR",
    "EAN_UPC_GUARD_WHITESPACE": "EANUPC_GUARD_WHITESPACE",
}


@dataclass
class Rectangle:
    """A filled rectangle. ``colour`` is a palette code, or None for foreground."""

    x: float
    y: float
    width: float
    height: float
    colour: int | None = None


@dataclass
class Hexagon:
    """A regular hexagon centred on (x, y).

    Rotation 0 or 180 gives a pointy-top hexagon, anything else flat-top.
    """

    x: float
    y: float
    diameter: float
    rotation: int = 0


@dataclass
class Circle:
    """A disc, or a ring when ``width`` (the stroke width) is non-zero."""

    x: float
    y: float
    diameter: float
    width: float = 0.0
    # Legacy: draw in the background colour instead of the foreground
    use_background: bool = False


@dataclass
class TextLabel:
    """Human-readable text anchored on its baseline at (x, y)."""

    x: float
    y: float
    text: str
    fsize: float
    halign: HAlign = HAlign.CENTRE
    rotation: float = 0


@dataclass
class Vector:
    """Finished geometry of a symbol, in output units."""

    width: float
    height: float
    rectangles: list[Rectangle] = field(default_factory=list)
    hexagons: list[Hexagon] = field(default_factory=list)
    circles: list[Circle] = field(default_factory=list)
    strings: list[TextLabel] = field(default_factory=list)


@dataclass
class Scene:
    """A symbol ready for serialisation.

    ``vector`` stays None until the layout stage has produced geometry.
    """

    symbology: Symbology = Symbology.CODE128
    foreground: Color = BLACK
    background: Color = WHITE
    output_options: OutputOptions = OutputOptions(0)
    vector: Vector | None = None

    @property
    def embed_font(self) -> bool:
        return bool(self.output_options & OutputOptions.EMBED_VECTOR_FONT)

    @property
    def bold(self) -> bool:
        return bool(self.output_options & OutputOptions.BOLD_TEXT)

    @property
    def is_upcean(self) -> bool:
        return is_upcean(self.symbology)
