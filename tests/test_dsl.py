"""Tests for the scene-building DSL."""

from __future__ import annotations

import pytest

from barsvg import (
    Color,
    HAlign,
    OutputOptions,
    Symbology,
    circle,
    hexagon,
    rect,
    render_to_svg,
    scene,
    text,
)


def test_scene_collects_shapes_in_order():
    with scene(width=40, height=20) as s:
        first = rect(0, 0, 1, 15)
        rect(2, 0, 1, 15, colour=3)
        hexagon(10, 10, 2, rotation=90)
        circle(20, 10, 4, width=0.5)
        label = text(20, 19, "12", fsize=5)

    assert s.vector is not None
    assert s.vector.width == 40
    assert s.vector.rectangles[0] is first
    assert [r.colour for r in s.vector.rectangles] == [None, 3]
    assert s.vector.hexagons[0].rotation == 90
    assert s.vector.circles[0].width == 0.5
    assert s.vector.strings == [label]
    assert label.halign == HAlign.CENTRE


def test_scene_colours_and_options():
    with scene(
        10,
        10,
        symbology=Symbology.UPCA,
        foreground="#112233",
        background=Color(1, 2, 3, 0),
        options=["bold-text", "embed-vector-font"],
    ) as s:
        pass

    assert s.foreground == Color(0x11, 0x22, 0x33)
    assert s.background.is_transparent
    assert s.output_options == OutputOptions.BOLD_TEXT | OutputOptions.EMBED_VECTOR_FONT
    assert s.is_upcean


@pytest.mark.parametrize(
    "halign, expected",
    [("start", HAlign.LEFT), ("end", HAlign.RIGHT), ("middle", HAlign.CENTRE), (HAlign.RIGHT, HAlign.RIGHT)],
)
def test_text_halign(halign, expected):
    with scene(10, 10):
        label = text(0, 0, "x", fsize=3, halign=halign)
    assert label.halign == expected


def test_shapes_outside_scene_raise():
    with pytest.raises(RuntimeError, match="scene"):
        rect(0, 0, 1, 1)
    with pytest.raises(RuntimeError):
        text(0, 0, "x", fsize=1)


def test_nested_scenes():
    with scene(10, 10) as outer:
        rect(0, 0, 1, 1)
        with scene(20, 20) as inner:
            rect(0, 0, 2, 2)
        rect(1, 0, 1, 1)

    assert len(outer.vector.rectangles) == 2
    assert len(inner.vector.rectangles) == 1


def test_scene_renders():
    with scene(width=100, height=50) as s:
        rect(0, 0, 100, 50)

    svg = render_to_svg(s)
    assert '  <path d="M0 0h100v50h-100Z"/>\n' in svg
