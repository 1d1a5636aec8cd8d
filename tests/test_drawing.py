"""Tests for placing symbols into drawsvg drawings."""

from __future__ import annotations

import drawsvg as draw
import pytest

from barsvg import MissingGeometryError, Scene, SvgRenderer, barcode_group, scene_to_drawing


def test_barcode_group_places_symbol(code128_scene):
    d = draw.Drawing(200, 100)
    d.append(barcode_group(code128_scene, x=10, y=20.5, scale=0.5))
    svg = d.as_svg()

    assert 'transform="translate(10,20.5) scale(0.5)"' in svg
    assert SvgRenderer().render_body(code128_scene) in svg


def test_barcode_group_without_scale(full_bar_scene):
    d = draw.Drawing(100, 50)
    d.append(barcode_group(full_bar_scene))
    svg = d.as_svg()

    assert 'transform="translate(0,0)"' in svg
    assert "scale(" not in svg
    assert '  <path d="M0 0h100v50h-100Z"/>' in svg


def test_scene_to_drawing(maxicode_scene):
    d = scene_to_drawing(maxicode_scene)
    assert isinstance(d, draw.Drawing)
    svg = d.as_svg()
    assert 'id="barcode"' in svg
    assert svg.count("<circle") == 3


def test_scene_to_drawing_needs_geometry():
    with pytest.raises(MissingGeometryError):
        scene_to_drawing(Scene())
