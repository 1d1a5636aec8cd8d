"""SVG renderer for barcode vector scenes.

The output is built as text rather than through an SVG object model so that
it is byte-for-byte stable: numbers carry no redundant digits, attributes
always come in the same order, and opacity is only written for colours that
are not fully opaque.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .errors import MissingGeometryError
from .fonts import FontAssets, family_for
from .formatting import close_tag, escape_text, format_attribute, format_float
from .models import HAlign
from .paths import hexagon_path, rectangle_paths

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .models import Circle, Scene, TextLabel, Vector

logger = logging.getLogger(__name__)

XML_HEADER = (
    '<?xml version="1.0" standalone="no"?>\n'
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
)
SVG_FOOTER = "</svg>\n"


@dataclass
class RenderConfig:
    """Configuration for SVG output.

    The defaults reproduce the reference output exactly; change them only
    when downstream consumers do not diff against it.
    """

    description: str = "Zint Generated Symbol"
    group_id: str = "barcode"
    fonts: FontAssets = field(default_factory=FontAssets)
    # Fallback chains written to font-family after the primary family
    normal_font_fallback: str = "Arial, sans-serif"
    upcean_font_fallback: str = "monospace"


def _text_anchor(halign: HAlign | int) -> str:
    if halign == HAlign.RIGHT:
        return "end"
    if halign == HAlign.LEFT:
        return "start"
    return "middle"


class SvgRenderer:
    """Renders scenes to SVG 1.1 documents."""

    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()

    def render(self, scene: Scene | None) -> str:
        """Render a scene to a complete SVG document.

        Raises:
            MissingGeometryError: if the scene has no vector geometry
        """
        if scene is None or scene.vector is None:
            raise MissingGeometryError()
        vector = scene.vector
        width = math.ceil(vector.width)
        height = math.ceil(vector.height)

        document = "".join([
            XML_HEADER,
            f'<svg width="{width}" height="{height}" version="1.1" '
            'xmlns="http://www.w3.org/2000/svg">\n',
            f" <desc>{escape_text(self.config.description)}</desc>\n",
            self.render_style(scene),
            self.render_body(scene),
            SVG_FOOTER,
        ])
        logger.debug(
            "Rendered symbology %s: %d rectangles, %d hexagons, %d circles, %d strings, %d bytes",
            scene.symbology,
            len(vector.rectangles),
            len(vector.hexagons),
            len(vector.circles),
            len(vector.strings),
            len(document),
        )
        return document

    def render_style(self, scene: Scene) -> str:
        """Render the ``<style>`` block embedding the text font, if wanted."""
        vector = self._require_vector(scene)
        if not (scene.embed_font and vector.strings):
            return ""
        family = family_for(scene.is_upcean)
        blob = self.config.fonts.blob_for(scene.is_upcean)
        if not blob:
            logger.warning("No font data for %s, not embedding font", family)
            return ""
        return (
            f' <style>@font-face {{font-family:"{family}"; '
            f"src:url(data:font/woff2;base64,{blob});}}</style>\n"
        )

    def render_body(self, scene: Scene) -> str:
        """Render the symbol group: background, shapes and text."""
        vector = self._require_vector(scene)
        fg = scene.foreground
        parts = [f' <g id="{self.config.group_id}" fill="#{fg.rgb_hex}">\n']

        if not scene.background.is_transparent:
            parts.append(self._render_background(scene, vector))
        parts.extend(rectangle_paths(vector.rectangles, fg))
        parts.append(hexagon_path(vector.hexagons, fg))
        parts.extend(self._render_circles(scene, vector.circles))
        parts.extend(self._render_strings(scene, vector.strings))

        parts.append(" </g>\n")
        return "".join(parts)

    @staticmethod
    def _require_vector(scene: Scene | None) -> Vector:
        if scene is None or scene.vector is None:
            raise MissingGeometryError()
        return scene.vector

    def _render_background(self, scene: Scene, vector: Vector) -> str:
        bg = scene.background
        return (
            f'  <rect x="0" y="0" width="{math.ceil(vector.width)}" '
            f'height="{math.ceil(vector.height)}" fill="#{bg.rgb_hex}"'
            + close_tag(bg.opacity)
        )

    def _render_circles(self, scene: Scene, circles: Iterable[Circle]) -> Iterator[str]:
        """Render circles as discs or rings.

        Circles flagged ``use_background`` are drawn in the background colour
        with background opacity on top of the foreground group fill, which
        does not composite the way users tend to expect. The output is kept
        as is since existing consumers compare against it.
        """
        fg, bg = scene.foreground, scene.background
        previous_diameter = radius = 0.0
        for circle in circles:
            if circle.diameter != previous_diameter:
                previous_diameter = circle.diameter
                radius = 0.5 * previous_diameter
            out = (
                "  <circle"
                + format_attribute("cx", circle.x, 2)
                + format_attribute("cy", circle.y, 2)
                + format_attribute("r", radius, 3 if circle.width else 2)
            )
            if circle.use_background:
                logger.debug("Legacy background-coloured circle at %s,%s", circle.x, circle.y)
                if circle.width:
                    out += f' stroke="#{bg.rgb_hex}"'
                    out += format_attribute("stroke-width", circle.width, 3)
                    out += ' fill="none"'
                else:
                    out += f' fill="#{bg.rgb_hex}"'
                out += close_tag(bg.opacity)
            else:
                if circle.width:
                    out += f' stroke="#{fg.rgb_hex}"'
                    out += format_attribute("stroke-width", circle.width, 3)
                    out += ' fill="none"'
                out += close_tag(fg.opacity)
            yield out

    def _render_strings(self, scene: Scene, strings: Iterable[TextLabel]) -> Iterator[str]:
        upcean = scene.is_upcean
        bold = scene.bold and not upcean
        fallback = (
            self.config.upcean_font_fallback if upcean else self.config.normal_font_fallback
        )
        font_family = f"{family_for(upcean)}, {fallback}"
        opacity = scene.foreground.opacity

        for string in strings:
            out = (
                "  <text"
                + format_attribute("x", string.x, 2)
                + format_attribute("y", string.y, 2)
                + f' text-anchor="{_text_anchor(string.halign)}"'
                + f' font-family="{font_family}"'
                + format_attribute("font-size", string.fsize, 1)
            )
            if bold:
                out += ' font-weight="bold"'
            if string.rotation != 0:
                out += (
                    format_float(string.rotation, 2, ' transform="rotate(')
                    + format_float(string.x, 2, ",")
                    + format_float(string.y, 2, ",")
                    + ')"'
                )
            out += close_tag(opacity, self_closing=False)
            out += f"   {escape_text(string.text)}\n"
            out += "  </text>\n"
            yield out


def render_to_svg(scene: Scene | None, config: RenderConfig | None = None) -> str:
    """Render a scene to an SVG document.

    Args:
        scene: The scene to render; its ``vector`` must be populated
        config: Optional output configuration

    Returns:
        SVG content as string

    Raises:
        MissingGeometryError: if there is no vector geometry
    """
    return SvgRenderer(config).render(scene)


def render_to_bytes(scene: Scene | None, config: RenderConfig | None = None) -> bytes:
    """Render a scene to a UTF-8 encoded SVG document."""
    return render_to_svg(scene, config).encode("utf-8")
