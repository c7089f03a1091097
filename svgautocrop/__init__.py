"""svg-autocrop: crop SVG documents to their visible content."""

from svgautocrop.engine import Pipeline, PipelineConfig, PassInfo, Viewport, autocrop
from svgautocrop.log import configure_logging
from svgautocrop.models.params import AutocropParams, PaddingEdges
from svgautocrop.svg.parser import parse_svg
from svgautocrop.svg.serializer import serialize_svg

__all__ = [
    "AutocropParams",
    "PaddingEdges",
    "PassInfo",
    "Pipeline",
    "PipelineConfig",
    "Viewport",
    "autocrop",
    "configure_logging",
    "parse_svg",
    "serialize_svg",
]
