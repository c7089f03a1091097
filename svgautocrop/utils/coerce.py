"""Strict coercion of untyped attribute text into numbers."""

from __future__ import annotations

import math
import re
from typing import Any

from svgautocrop.errors import AutocropError, DocumentStructureError

# Optional sign, digits, an optional all-zero fraction and an optional "px" unit.
_INTEGER_RE = re.compile(r"^\s*([+-]?\d+)(?:\.0*)?\s*(?:px)?\s*$")

# SVG <number> grammar (no units, no hex, no underscores).
_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")

# 12 decimal places is lossless for any coordinate range found in practice while
# still absorbing binary float noise such as 10.53 + 1 -> 11.530000000000001.
NUMBER_PRECISION = 12


def ensure_integer(
    value: Any,
    description: str = "integer",
    error: type[AutocropError] = DocumentStructureError,
) -> int:
    """Coerce ``value`` to ``int`` or raise ``error``.

    Accepts ints, integral floats and strings such as ``"20"``, ``"-1"``,
    ``"32px"`` or ``"10.0"``. Booleans, fractions and non-numeric text fail.
    """
    if value is None:
        raise error(f"[{description}] Expected a value, got none")
    if isinstance(value, bool):
        raise error(f"[{description}] Expected an integer, got boolean {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise error(f"[{description}] Number is not integer: {value!r}")
        return int(value)
    if isinstance(value, str):
        m = _INTEGER_RE.match(value)
        if m:
            return int(m.group(1))
        if parse_number(value.removesuffix("px")) is not None:
            raise error(f"[{description}] Number is not integer: {value!r}", value=value)
        raise error(f"[{description}] Couldn't convert string to integer: {value!r}", value=value)
    raise error(
        f"[{description}] Expected an integer (or a string holding one), "
        f"got {type(value).__name__}: {value!r}"
    )


def parse_number(text: str | None) -> float | None:
    """Parse an SVG number. Returns None for empty, non-numeric or non-finite text."""
    if text is None or not _NUMBER_RE.match(text):
        return None
    num = float(text)
    if not math.isfinite(num):
        return None
    return num


def format_number(value: float) -> str:
    """Shortest stable text for a coordinate: ``5.0 -> "5"``, ``-0.0 -> "0"``."""
    rounded = round(float(value), NUMBER_PRECISION)
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)
