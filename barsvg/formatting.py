"""Number and text formatting for SVG output."""

from __future__ import annotations

from xml.sax.saxutils import escape

# Entities beyond the &amp; &lt; &gt; that saxutils always handles
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def format_float(value: float, dp: int, prefix: str = "") -> str:
    """Format a float with at most ``dp`` decimal places.

    Trailing zeros are dropped, and so is the decimal point when no
    fractional digits remain. The sign is kept even when the value
    rounds to zero, so ``format_float(-0.0001, 2)`` gives ``"-0"``.

    Args:
        value: Finite value to format
        dp: Maximum number of fractional digits
        prefix: Literal text placed directly before the number

    Returns:
        ``prefix`` followed by the shortest representation at ``dp`` digits
    """
    text = f"{value:.{dp}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return prefix + text


def format_attribute(name: str, value: float, dp: int) -> str:
    """Format a numeric attribute as ` name="value"`."""
    return format_float(value, dp, f' {name}="') + '"'


def close_tag(opacity: float | None, self_closing: bool = True) -> str:
    """Finish an open tag, adding an opacity attribute unless opaque."""
    attribute = "" if opacity is None else format_attribute("opacity", opacity, 3)
    return attribute + ("/>\n" if self_closing else ">\n")


def escape_text(text: str) -> str:
    """Replace the five XML special characters with named entities.

    This is one-way: escaping already escaped text escapes its ``&`` again.
    """
    return escape(text, _QUOTE_ENTITIES)
