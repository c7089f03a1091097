"""Rasterization: SVG markup to an RGBA pixel buffer using CairoSVG."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Protocol

import cairosvg
from PIL import Image

from svgautocrop.errors import RenderError


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major, top-to-bottom RGBA bytes (4 per pixel)."""

    pixels: bytes
    width: int
    height: int


class Rasterizer(Protocol):
    def __call__(self, markup: str) -> PixelBuffer: ...


def rasterize_svg(markup: str) -> PixelBuffer:
    """Render markup at its declared ``width``/``height``.

    Raises:
        RenderError: CairoSVG or Pillow could not produce an image.
    """
    raw = markup.encode("utf-8") if isinstance(markup, str) else markup
    try:
        png_data = cairosvg.svg2png(bytestring=raw)
        image = Image.open(io.BytesIO(png_data)).convert("RGBA")
    except Exception as e:
        raise RenderError(f"Failed to render SVG: {e}") from e
    return PixelBuffer(image.tobytes(), image.width, image.height)
