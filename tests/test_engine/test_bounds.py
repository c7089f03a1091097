"""Tests for the visible-bounds scanner."""

import pytest

from tests.conftest import FakeRasterizer, paint_boxes

from svgautocrop.engine.bounds import PixelBounds, compute_visible_bounds, visible_viewport
from svgautocrop.engine.context import Viewport
from svgautocrop.errors import RenderError


def test_single_box():
    bounds = compute_visible_bounds(paint_boxes(20, 20, [(5, 5, 10, 10)]), 20, 20)
    assert bounds == PixelBounds(5, 5, 14, 14)
    assert (bounds.width, bounds.height) == (10, 10)


def test_envelope_of_several_boxes():
    pixels = paint_boxes(30, 20, [(2, 10, 1, 1), (20, 3, 5, 2)])
    assert compute_visible_bounds(pixels, 30, 20) == PixelBounds(2, 3, 24, 10)


def test_only_alpha_counts():
    buf = bytearray(4 * 4 * 4)
    buf[0:4] = b"\xff\xff\xff\x00"  # white but fully transparent
    i = (2 * 4 + 3) * 4
    buf[i:i + 4] = b"\x00\x00\x00\x01"  # black, barely visible
    assert compute_visible_bounds(bytes(buf), 4, 4) == PixelBounds(3, 2, 3, 2)


def test_full_canvas():
    assert compute_visible_bounds(paint_boxes(3, 2, [(0, 0, 3, 2)]), 3, 2) == PixelBounds(0, 0, 2, 1)


def test_no_visible_pixels():
    with pytest.raises(RenderError, match="no visible pixels"):
        compute_visible_bounds(bytes(10 * 10 * 4), 10, 10)


def test_buffer_length_mismatch():
    with pytest.raises(RenderError, match="expected 400"):
        compute_visible_bounds(bytes(399), 10, 10)


def test_invalid_dimensions():
    with pytest.raises(RenderError):
        compute_visible_bounds(b"", 0, 10)


def test_viewport_offset_is_applied():
    fake = FakeRasterizer(20, 20, [(5, 5, 10, 10)])
    result = visible_viewport("<svg/>", Viewport(-1, -2, 20, 20), fake)
    assert result == Viewport(4, 3, 10, 10)
    assert fake.calls == ["<svg/>"]


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (0, 0)])
def test_zero_sized_viewport_skips_render(width, height):
    fake = FakeRasterizer(10, 10, [(0, 0, 1, 1)])
    assert visible_viewport("<svg/>", Viewport(3, 4, width, height), fake) == Viewport(3, 4, 0, 0)
    assert fake.calls == []


def test_unexpected_render_size():
    fake = FakeRasterizer(10, 10, [(0, 0, 1, 1)])
    with pytest.raises(RenderError, match="Unexpected render size 10x10, expected 20x20"):
        visible_viewport("<svg/>", Viewport(0, 0, 20, 20), fake)
