"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgautocrop.utils.rasterizer import PixelBuffer


# Sample SVGs

RECT_SVG = '''<svg viewBox="0 0 20 20" xmlns="http://www.w3.org/2000/svg">
    <rect x="5" y="5" width="10" height="10" fill="#000"/>
</svg>'''

RECT_SIZED_SVG = '''<svg width="20" height="20" xmlns="http://www.w3.org/2000/svg">
    <rect x="5" y="5" width="10" height="10" fill="#000"/>
</svg>'''

CROPPED_RECT_SVG = '<svg viewBox="0 0 10 10" xmlns="http://www.w3.org/2000/svg"><rect x="0" y="0" width="10" height="10" fill="currentColor"/></svg>'

SHAPES_SVG = '''<svg viewBox="0 0 40 40" xmlns="http://www.w3.org/2000/svg">
    <g fill="#000">
        <line x1="10" y1="12" x2="30" y2="12" stroke="#000" stroke-width="2"/>
        <circle cx="20" cy="20" r="4"/>
        <ellipse cx="20" cy="28" rx="6" ry="2"/>
        <path d="M10 30 h20 v2 h-20 z"/>
    </g>
</svg>'''

TRANSFORM_SVG = '''<svg viewBox="0 0 20 20" xmlns="http://www.w3.org/2000/svg">
    <g transform="translate(1 1)" class="icon">
        <rect x="4" y="4" width="10" height="10" fill="#000"/>
    </g>
</svg>'''

TWO_COLOR_SVG = '<svg viewBox="0 0 20 20"><path fill="black" d="M5 5h5v5h-5z"/><path stroke="red" d="M10 10h5v5h-5z"/></svg>'

SKETCH_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<svg width="32px" height="32px" viewBox="-1 -2 32 32" version="1.1" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" xmlns:sketch="http://www.bohemiancoding.com/sketch/ns">
    <!-- Generator: Sketch 3.0.3 (7891) - http://www.bohemiancoding.com/sketch -->
    <title>icon 43 note remove</title>
    <desc>Created with Sketch.</desc>
    <defs></defs>
    <g id="Page-1" stroke="none" stroke-width="1" fill="none" fill-rule="evenodd" sketch:type="MSPage">
        <g id="icon-43-note-remove" sketch:type="MSArtboardGroup" fill="#157EFB">
            <path d="M3,9 L3,6 C3,4.9 3.9,4 5,4 L24,4 C25.1,4 26,4.9 26,6 L26,9 L3,9 Z" id="note-remove" sketch:type="MSShapeGroup"></path>
        </g>
    </g>
</svg>'''


# Fake rasterizer

class FakeRasterizer:
    """Paints opaque rectangles into an otherwise transparent RGBA buffer.

    ``boxes`` are ``(x, y, width, height)`` in pixel coordinates. Every call is
    recorded so tests can assert whether rendering happened.
    """

    def __init__(self, width: int, height: int, boxes: list[tuple[int, int, int, int]]):
        self.width = width
        self.height = height
        self.boxes = boxes
        self.calls: list[str] = []

    def __call__(self, markup: str) -> PixelBuffer:
        self.calls.append(markup)
        return PixelBuffer(paint_boxes(self.width, self.height, self.boxes), self.width, self.height)


def paint_boxes(width: int, height: int, boxes: list[tuple[int, int, int, int]]) -> bytes:
    buf = bytearray(width * height * 4)
    for bx, by, bw, bh in boxes:
        for y in range(by, by + bh):
            for x in range(bx, bx + bw):
                i = (y * width + x) * 4
                buf[i:i + 4] = b"\x00\x00\x00\xff"
    return bytes(buf)


@pytest.fixture
def rect_svg() -> str:
    return RECT_SVG


@pytest.fixture
def rect_rasterizer() -> FakeRasterizer:
    """Renders RECT_SVG: a 10x10 box at (5, 5) on a 20x20 canvas."""
    return FakeRasterizer(20, 20, [(5, 5, 10, 10)])
