"""Autocrop engine: visible-bounds scanning, coordinate rewriting, recoloring and the pass host."""

from svgautocrop.engine.registry import plugin, get_registry
from svgautocrop.engine.context import PassInfo, Viewport
from svgautocrop.engine.autocrop import autocrop
from svgautocrop.engine.pipeline import Pipeline, PipelineConfig

__all__ = [
    "plugin",
    "get_registry",
    "PassInfo",
    "Viewport",
    "autocrop",
    "Pipeline",
    "PipelineConfig",
]
