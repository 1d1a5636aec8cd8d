"""Tests for the scene model and symbology helpers."""

from __future__ import annotations

import pytest

from barsvg import OutputOptions, Rectangle, Scene, Symbology, Vector, is_upcean


@pytest.mark.parametrize(
    "symbology",
    [
        Symbology.EANX,
        Symbology.EANX_CHK,
        Symbology.UPCA,
        Symbology.UPCA_CHK,
        Symbology.UPCE,
        Symbology.UPCE_CHK,
        Symbology.ISBNX,
        Symbology.EANX_CC,
        Symbology.UPCA_CC,
        Symbology.UPCE_CC,
    ],
)
def test_upcean_family(symbology):
    assert is_upcean(symbology)


@pytest.mark.parametrize(
    "symbology", [Symbology.CODE128, Symbology.QRCODE, Symbology.MAXICODE, Symbology.EAN14]
)
def test_not_upcean(symbology):
    assert not is_upcean(symbology)


def test_is_upcean_accepts_plain_numbers():
    assert is_upcean(34)
    assert not is_upcean(20)


def test_output_options_from_names():
    opts = OutputOptions.from_names(["bold-text", "EMBED_VECTOR_FONT"])
    assert opts == OutputOptions.BOLD_TEXT | OutputOptions.EMBED_VECTOR_FONT


def test_output_options_aliases():
    assert OutputOptions.from_names(["cmyk-color"]) == OutputOptions.CMYK_COLOUR
    assert (
        OutputOptions.from_names(["ean-upc-guard-whitespace"])
        == OutputOptions.EANUPC_GUARD_WHITESPACE
    )
    assert OutputOptions.from_names([]) == OutputOptions(0)


def test_output_options_unknown_name():
    with pytest.raises(ValueError, match="no-such-option"):
        OutputOptions.from_names(["bold-text", "no-such-option"])


def test_scene_flags():
    s = Scene(output_options=OutputOptions.BOLD_TEXT | OutputOptions.BARCODE_BOX)
    assert s.bold
    assert not s.embed_font
    s.output_options |= OutputOptions.EMBED_VECTOR_FONT
    assert s.embed_font


def test_scene_defaults():
    s = Scene()
    assert s.vector is None
    assert s.symbology == Symbology.CODE128
    assert not s.is_upcean
    assert s.foreground.rgb_hex == "000000"
    assert s.background.rgb_hex == "FFFFFF"


def test_vector_sequences_are_independent():
    a = Vector(10, 10)
    b = Vector(10, 10)
    a.rectangles.append(Rectangle(0, 0, 1, 1))
    assert b.rectangles == []
