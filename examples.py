"""Showcase examples for barsvg README."""

from pathlib import Path

from barsvg import (
    OutputOptions,
    Symbology,
    circle,
    hexagon,
    rect,
    render_to_svg,
    scene,
    text,
)

OUTPUT = Path("output")


def save(name: str, svg: str) -> None:
    OUTPUT.mkdir(exist_ok=True)
    (OUTPUT / f"{name}.svg").write_text(svg, encoding="utf-8")
    print(f"Saved {OUTPUT / name}.svg")


def linear_example():
    """Bars plus human-readable text, like a Code 128 symbol."""
    widths = [2, 1, 2, 2, 2, 2, 1, 2, 2, 1, 3, 1, 2, 3, 1, 1, 2, 3]
    with scene(width=62, height=32.5, symbology=Symbology.CODE128) as s:
        x = 2.0
        for i, w in enumerate(widths):
            if i % 2 == 0:
                rect(x, 0, w, 25)
            x += w
        text(31, 31.5, "Hi <&>", fsize=7)

    save("linear", render_to_svg(s))


def maxicode_example():
    """Hexagonal modules around a bullseye, like a MaxiCode symbol."""
    with scene(width=60, height=57.73, symbology=Symbology.MAXICODE,
               foreground="1A1A80", background="FFFFFF00") as s:
        for row in range(0, 33, 4):
            for col in range(0, 30, 3):
                offset = 1 if row % 8 else 0
                hexagon(2 + col * 1.9 + offset, 2 + row * 1.65, 1.7)
        for diameter in (18, 13, 8):
            circle(30, 28.8, diameter, width=1.3)

    save("maxicode", render_to_svg(s))


def ultracode_example():
    """Palette-coloured rectangles; runs of one colour share a path."""
    colours = [7, 7, 1, 1, 1, 3, 5, 5, 6, 2, 4, 4, 8]
    with scene(width=30, height=6, symbology=Symbology.ULTRA,
               options=OutputOptions.BOLD_TEXT) as s:
        for i, colour in enumerate(colours):
            rect(2 + i * 2, 1, 2, 4, colour=colour)

    save("ultracode", render_to_svg(s))


def ean_example():
    """UPC/EAN text uses OCR-B and is never bold."""
    with scene(width=95, height=60, symbology=Symbology.EANX,
               options=["bold-text"]) as s:
        for x in (11, 13, 45, 47, 79, 81):
            rect(x, 0, 1, 55)
        text(5, 59, "5", fsize=10, halign="end")
        text(29, 59, "901234", fsize=10)
        text(63, 59, "123457", fsize=10)

    save("ean", render_to_svg(s))


if __name__ == "__main__":
    linear_example()
    maxicode_example()
    ultracode_example()
    ean_example()
