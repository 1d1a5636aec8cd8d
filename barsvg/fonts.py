"""Fonts that can be embedded in the SVG output."""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

NORMAL_FONT_FAMILY = "Arimo"
UPCEAN_FONT_FAMILY = "OCRB"


def family_for(upcean: bool) -> str:
    """Font family used for a symbol's human-readable text."""
    return UPCEAN_FONT_FAMILY if upcean else NORMAL_FONT_FAMILY


@dataclass(frozen=True)
class FontAssets:
    """Base64-encoded WOFF2 font data for the two text families.

    The data is opaque here; it is produced by the font asset build.
    """

    normal: str = ""
    upcean: str = ""

    @classmethod
    def from_files(
        cls,
        normal: str | Path | None = None,
        upcean: str | Path | None = None,
    ) -> FontAssets:
        """Load WOFF2 files and base64-encode them."""

        def load(path: str | Path | None) -> str:
            if path is None:
                return ""
            data = Path(path).read_bytes()
            logger.debug("Loaded font %s (%d bytes)", path, len(data))
            return base64.b64encode(data).decode("ascii")

        return cls(normal=load(normal), upcean=load(upcean))

    def blob_for(self, upcean: bool) -> str:
        return self.upcean if upcean else self.normal
