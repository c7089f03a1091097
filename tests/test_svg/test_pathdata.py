"""Tests for path data parsing, translation and encoding."""

import pytest
from svgpathtools import Line, parse_path

from svgautocrop.svg.pathdata import (
    PathDataError,
    encode_path_data,
    parse_path_data,
    translate_commands,
    translate_path_data,
)


def test_quadratic_with_smooth_shorthand():
    assert translate_path_data("M20,230 Q40,205 50,230 T90,230", 1, 2) == "M21 232 Q41 207 51 232 T91 232"


def test_parse_splits_implicit_repeats():
    path = parse_path_data("M0 0 10 10 20 0")
    assert list(path) == [Line(0j, 10 + 10j), Line(10 + 10j, 20 + 0j)]
    assert encode_path_data(path) == "M0 0 L10 10 L20 0"


def test_compact_number_forms():
    assert translate_path_data("M-1-2L.5.5 1e1,2E-1", 0, 0) == "M-1 -2 L0.5 0.5 L10 0.2"


def test_relative_commands_become_absolute():
    path = parse_path_data("m10 10 l5 0 h5 v5 z")
    assert encode_path_data(path) == "M10 10 L15 10 L20 10 L20 15 Z"


def test_closepath_returns_to_subpath_start():
    assert translate_path_data("m10 10 h5 z m2 2 h1", 0, 0) == "M10 10 L15 10 Z M12 12 L13 12"


def test_explicit_line_to_start_then_close():
    d = "M3,9 L3,6 L26,6 L3,9 Z"
    assert translate_path_data(d, 1, 1) == "M4 10 L4 7 L27 7 Z"


def test_translate_commands_shifts_segments():
    shifted = translate_commands(parse_path_data("M10 10 h5 v5 z"), -10, -10)
    assert shifted[0].start == 0j
    assert encode_path_data(shifted) == "M0 0 L5 0 L5 5 Z"


def test_smooth_cubic():
    assert translate_path_data("M0 0 c1 1 2 2 3 3 s1 1 2 2", 0, 0) == "M0 0 C1 1 2 2 3 3 S4 4 5 5"


def test_arc_moves_end_point_only():
    # radii, rotation and flags stay
    assert translate_path_data("M0 0 a5 5 0 0 1 1 1", 2, 3) == "M2 3 A5 5 0 0 1 3 4"


def test_float_noise_is_rounded():
    assert translate_path_data("M0.5 0.25 L1 1", 0.1, 0) == "M0.6 0.25 L1.1 1"
    assert translate_path_data("M10.53 1 L0 0", 1, -1) == "M11.53 0 L1 -1"


def test_empty_path():
    assert translate_path_data("", 5, 5) == ""


@pytest.mark.parametrize("d", ["L0 0", "M0", "M0 0 X1 1", "M0 0 L1"])
def test_malformed(d):
    with pytest.raises(PathDataError):
        parse_path_data(d)


@pytest.mark.parametrize(
    "d",
    [
        "M20,230 Q40,205 50,230 T90,230",
        "M3,9 L3,6 C3,4.9 3.9,4 5,4 L24,4 C25.1,4 26,4.9 26,6 L26,9 L3,9 Z",
        "m2 2 c1 0 2 1 2 2 s-1 2 -2 2 q-1 0 -1 -1 t1 -3 h4 v3 a2 3 0 1 0 2 2",
    ],
)
def test_encoding_reparses_to_translated_geometry(d):
    dx, dy = -3.5, 7.25
    expected = parse_path(d).translated(complex(dx, dy))
    actual = parse_path(translate_path_data(d, dx, dy))
    for t in (0.0, 0.2, 0.5, 0.8, 1.0):
        assert abs(actual.point(t) - expected.point(t)) < 1e-6
