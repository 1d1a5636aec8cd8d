"""Shared test fixtures."""

from __future__ import annotations

import pytest

from barsvg import (
    Circle,
    Color,
    HAlign,
    Hexagon,
    OutputOptions,
    Rectangle,
    Scene,
    Symbology,
    TextLabel,
    Vector,
)


def make_scene(
    width: float = 100,
    height: float = 50,
    rectangles: list[Rectangle] | None = None,
    hexagons: list[Hexagon] | None = None,
    circles: list[Circle] | None = None,
    strings: list[TextLabel] | None = None,
    **kwargs,
) -> Scene:
    """Build a scene around a fresh Vector."""
    vector = Vector(
        width=width,
        height=height,
        rectangles=rectangles or [],
        hexagons=hexagons or [],
        circles=circles or [],
        strings=strings or [],
    )
    return Scene(vector=vector, **kwargs)


@pytest.fixture
def full_bar_scene() -> Scene:
    """100x50 black on white with one rectangle covering the canvas."""
    return make_scene(rectangles=[Rectangle(0, 0, 100, 50)])


@pytest.fixture
def code128_scene() -> Scene:
    return make_scene(
        width=60.5,
        height=30.25,
        rectangles=[
            Rectangle(2, 0, 2, 25),
            Rectangle(6, 0, 1, 25),
            Rectangle(9.5, 0, 1.5, 25),
        ],
        strings=[TextLabel(30.25, 29, "AB&C", fsize=7)],
        symbology=Symbology.CODE128,
    )


@pytest.fixture
def maxicode_scene() -> Scene:
    return make_scene(
        width=60,
        height=58,
        hexagons=[Hexagon(10, 10, 2), Hexagon(12, 10, 2), Hexagon(11, 11.73, 2)],
        circles=[
            Circle(30, 29, 8.5, width=1.25),
            Circle(30, 29, 4.5, width=1.25),
            Circle(30, 29, 1),
        ],
        symbology=Symbology.MAXICODE,
    )


@pytest.fixture
def ean_scene() -> Scene:
    return make_scene(
        width=95,
        height=60,
        rectangles=[Rectangle(11, 0, 1, 55), Rectangle(13, 0, 1, 55)],
        strings=[
            TextLabel(5, 59, "5", fsize=10, halign=HAlign.RIGHT),
            TextLabel(40, 59, "901234", fsize=10),
        ],
        symbology=Symbology.EANX,
        output_options=OutputOptions.BOLD_TEXT,
    )


@pytest.fixture
def translucent() -> Color:
    """Black at alpha 128, which renders as opacity 0.502."""
    return Color(0, 0, 0, 128)
