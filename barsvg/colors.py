"""Colour handling: RGBA channels, opacity and the module palette."""

from __future__ import annotations

from dataclasses import dataclass

# Ultracode module colours, indexed by palette code - 1
PALETTE = (
    "00ffff",  # 1: cyan
    "0000ff",  # 2: blue
    "ff00ff",  # 3: magenta
    "ff0000",  # 4: red
    "ffff00",  # 5: yellow
    "00ff00",  # 6: green
    "000000",  # 7: black
    "ffffff",  # 8: white
)
_PALETTE_BLACK = 6


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            channel = getattr(self, name)
            if not 0 <= channel <= 255:
                raise ValueError(f"{name} channel out of range: {channel}")

    @classmethod
    def from_packed(cls, value: int) -> Color:
        """Build a colour from a packed 0xRRGGBBAA integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Packed colour out of range: {value:#x}")
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse "RRGGBB" or "RRGGBBAA", with or without a leading '#'."""
        digits = text[1:] if text.startswith("#") else text
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid colour {text!r}, expected RRGGBB or RRGGBBAA")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid colour {text!r}, expected hex digits") from None
        return cls(*channels)

    @property
    def packed(self) -> int:
        return (self.red << 24) | (self.green << 16) | (self.blue << 8) | self.alpha

    @property
    def rgb_hex(self) -> str:
        """Six uppercase hex digits, without '#'."""
        return f"{self.red:02X}{self.green:02X}{self.blue:02X}"

    def to_hex_string(self) -> str:
        """RRGGBB for opaque colours, RRGGBBAA otherwise."""
        if self.is_opaque:
            return self.rgb_hex
        return f"{self.rgb_hex}{self.alpha:02X}"

    @property
    def is_opaque(self) -> bool:
        return self.alpha == 0xFF

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0

    @property
    def opacity(self) -> float | None:
        """Alpha as a 0-1 fraction, or None when fully opaque."""
        if self.is_opaque:
            return None
        return self.alpha / 255.0


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


def palette_colour(code: int) -> str:
    """Map a palette code 1-8 to its hex triplet; other codes give black."""
    index = code - 1 if 1 <= code <= 8 else _PALETTE_BLACK
    return PALETTE[index]
