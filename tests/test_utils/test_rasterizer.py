"""Tests for CairoSVG rasterization."""

import pytest

from svgautocrop.engine.bounds import compute_visible_bounds
from svgautocrop.errors import RenderError
from svgautocrop.utils.rasterizer import rasterize_svg

SMALL_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="10" viewBox="0 0 20 10">'
    '<rect x="2" y="3" width="4" height="5" fill="#000"/></svg>'
)


def test_render_size_follows_declared_dimensions():
    buf = rasterize_svg(SMALL_SVG)
    assert (buf.width, buf.height) == (20, 10)
    assert len(buf.pixels) == 20 * 10 * 4


def test_rendered_rect_bounds():
    buf = rasterize_svg(SMALL_SVG)
    bounds = compute_visible_bounds(buf.pixels, buf.width, buf.height)
    assert (bounds.x_min, bounds.y_min, bounds.x_max, bounds.y_max) == (2, 3, 5, 7)


def test_render_failure():
    with pytest.raises(RenderError, match="Failed to render"):
        rasterize_svg("this is not markup")
