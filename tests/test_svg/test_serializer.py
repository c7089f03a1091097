"""Tests for the SVG serializer."""

from tests.conftest import RECT_SVG, SKETCH_SVG

from svgautocrop.svg.parser import parse_svg
from svgautocrop.svg.serializer import serialize_svg
from svgautocrop.svg.tree import Element, Text

RECT_COMPACT = (
    '<svg viewBox="0 0 20 20" xmlns="http://www.w3.org/2000/svg">'
    '<rect x="5" y="5" width="10" height="10" fill="#000"/></svg>'
)


def test_compact_document():
    assert serialize_svg(parse_svg(RECT_SVG)) == RECT_COMPACT


def test_single_element_subtree():
    rect = parse_svg(RECT_SVG).root_element().children[0]
    assert serialize_svg(rect) == '<rect x="5" y="5" width="10" height="10" fill="#000"/>'


def test_compact_output_reparses_to_same_output():
    once = serialize_svg(parse_svg(SKETCH_SVG))
    assert serialize_svg(parse_svg(once)) == once


def test_prolog_and_comments():
    out = serialize_svg(parse_svg(SKETCH_SVG))
    assert out.startswith('<?xml version="1.0" encoding="UTF-8" standalone="no"?><svg width="32px"')
    assert "<!-- Generator: Sketch 3.0.3 (7891) - http://www.bohemiancoding.com/sketch -->" in out
    assert "<defs/>" in out


def test_escaping():
    el = Element("text", {"data-label": 'a & "b"'}, [Text("1 < 2")])
    assert serialize_svg(el) == '<text data-label="a &amp; &quot;b&quot;">1 &lt; 2</text>'


def test_cdata_written_verbatim():
    el = Element("style", {}, [Text(".a > b {}", cdata=True)])
    assert serialize_svg(el) == "<style><![CDATA[.a > b {}]]></style>"


def test_pretty():
    root = parse_svg("<svg><g><rect/></g><title>Icon</title></svg>")
    assert serialize_svg(root, pretty=True) == (
        "<svg>\n"
        "  <g>\n"
        "    <rect/>\n"
        "  </g>\n"
        "  <title>Icon</title>\n"
        "</svg>"
    )
