"""Visible-bounds scanner: the tightest pixel rectangle with non-zero alpha."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from svgautocrop.engine.context import Viewport
from svgautocrop.errors import RenderError
from svgautocrop.utils.rasterizer import Rasterizer, rasterize_svg

logger = logging.getLogger(__name__)

_CHANNELS = 4  # R, G, B, A
_ALPHA = 3


@dataclass(frozen=True)
class PixelBounds:
    """Inclusive pixel envelope."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    @property
    def width(self) -> int:
        return self.x_max - self.x_min + 1

    @property
    def height(self) -> int:
        return self.y_max - self.y_min + 1


def compute_visible_bounds(pixels: bytes, width: int, height: int) -> PixelBounds:
    """Scan every pixel and return the envelope of those with alpha > 0.

    Raises:
        RenderError: bad dimensions, a buffer of the wrong length, or nothing visible.
    """
    if width <= 0 or height <= 0:
        raise RenderError(f"Invalid render size {width}x{height}")
    expected = width * height * _CHANNELS
    if len(pixels) != expected:
        raise RenderError(
            f"Pixel buffer has {len(pixels)} bytes, expected {expected} for {width}x{height} RGBA"
        )

    alpha = np.frombuffer(pixels, dtype=np.uint8).reshape(height, width, _CHANNELS)[:, :, _ALPHA]
    ys, xs = np.nonzero(alpha)
    if xs.size == 0:
        raise RenderError("Image has no visible pixels")

    bounds = PixelBounds(int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))
    if not (0 <= bounds.x_min <= bounds.x_max < width and 0 <= bounds.y_min <= bounds.y_max < height):
        raise RenderError(f"Bounds {bounds} fall outside the {width}x{height} render")
    return bounds


def visible_viewport(
    markup: str,
    viewport: Viewport,
    rasterize: Rasterizer | None = None,
) -> Viewport:
    """Render ``markup`` and map its visible pixel bounds back into viewport coordinates.

    A zero-sized viewport renders nothing, so it short-circuits to an empty
    result at the same origin without calling the rasterizer.
    """
    if viewport.width == 0 or viewport.height == 0:
        logger.debug("Zero-sized viewport %s, skipping render", viewport)
        return Viewport(viewport.x, viewport.y, 0, 0)

    render = (rasterize or rasterize_svg)(markup)
    if render.width != viewport.width or render.height != viewport.height:
        raise RenderError(
            f"Unexpected render size {render.width}x{render.height}, "
            f"expected {viewport.width}x{viewport.height}"
        )

    bounds = compute_visible_bounds(render.pixels, render.width, render.height)
    result = Viewport(
        viewport.x + bounds.x_min,
        viewport.y + bounds.y_min,
        bounds.width,
        bounds.height,
    )
    logger.debug("Visible bounds %s within %s", result, viewport)
    return result
