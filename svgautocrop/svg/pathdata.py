"""Path data (``<path d>``) translation on top of svgpathtools.

svgpathtools expands implicit repeats and converts relative commands to
absolute segments while parsing; this module shifts those segments and writes
them back as compact absolute path data. Smooth quadratic/cubic continuations
are re-emitted as T/S and a line closing a subpath as Z.
"""

from __future__ import annotations

import re

from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier, parse_path

from svgautocrop.utils.coerce import format_number

# Characters svgpathtools would silently skip are rejected up front.
_PATH_DATA_RE = re.compile(r"^[\s,]*(?:[Mm][MmZzLlHhVvCcSsQqTtAa0-9eE.+\-\s,]*)?$")

_TOLERANCE = 1e-6


class PathDataError(ValueError):
    """Malformed path data."""


def parse_path_data(d: str) -> Path:
    """Parse ``d`` into absolute svgpathtools segments.

    Raises:
        PathDataError: unknown command letters, a missing leading moveto, or
            a command short of arguments.
    """
    if not _PATH_DATA_RE.match(d):
        raise PathDataError(f"Path data must start with a moveto and hold only path commands: {d!r}")
    try:
        return parse_path(d)
    except (ValueError, IndexError) as e:
        raise PathDataError(f"Malformed path data {d!r}: {e}") from e


def translate_commands(path: Path, dx: float, dy: float) -> Path:
    """Shift every segment by ``(dx, dy)``; arc radii and rotation are kept."""
    return path.translated(complex(dx, dy))


def _point(z: complex) -> str:
    return f"{format_number(z.real)} {format_number(z.imag)}"


def _near(a: complex, b: complex) -> bool:
    return abs(a - b) < _TOLERANCE


def _split_subpaths(path: Path) -> list[list]:
    """Group segments at moveto discontinuities."""
    subpaths: list[list] = []
    current: list = []
    for seg in path:
        if current and not _near(seg.start, current[-1].end):
            subpaths.append(current)
            current = []
        current.append(seg)
    if current:
        subpaths.append(current)
    return subpaths


def _encode_segment(seg, prev) -> str:
    if isinstance(seg, Line):
        return "L" + _point(seg.end)
    if isinstance(seg, QuadraticBezier):
        reflected = 2 * seg.start - prev.control if isinstance(prev, QuadraticBezier) else seg.start
        if _near(seg.control, reflected):
            return "T" + _point(seg.end)
        return f"Q{_point(seg.control)} {_point(seg.end)}"
    if isinstance(seg, CubicBezier):
        reflected = 2 * seg.start - prev.control2 if isinstance(prev, CubicBezier) else seg.start
        if _near(seg.control1, reflected):
            return f"S{_point(seg.control2)} {_point(seg.end)}"
        return f"C{_point(seg.control1)} {_point(seg.control2)} {_point(seg.end)}"
    if isinstance(seg, Arc):
        return (
            f"A{_point(seg.radius)} {format_number(seg.rotation)} "
            f"{int(bool(seg.large_arc))} {int(bool(seg.sweep))} {_point(seg.end)}"
        )
    raise PathDataError(f"Unsupported path segment {type(seg).__name__}")


def encode_path_data(path: Path) -> str:
    """Canonical text form: ``M21 232 Q41 207 51 232 T91 232``."""
    parts: list[str] = []
    for subpath in _split_subpaths(path):
        start = subpath[0].start
        parts.append("M" + _point(start))
        prev = None
        for i, seg in enumerate(subpath):
            closing = (
                i == len(subpath) - 1 and i > 0
                and isinstance(seg, Line) and _near(seg.end, start)
            )
            parts.append("Z" if closing else _encode_segment(seg, prev))
            prev = seg
    return " ".join(parts)


def translate_path_data(d: str, dx: float, dy: float) -> str:
    """Parse, shift by ``(dx, dy)`` and re-encode path data."""
    return encode_path_data(translate_commands(parse_path_data(d), dx, dy))
