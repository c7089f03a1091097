"""Multipass pipeline host: runs registered passes over a document until it stops changing."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Union

from svgautocrop.config import settings
from svgautocrop.engine.context import PassInfo
from svgautocrop.engine.registry import PluginRegistry, PluginSpec, get_registry
from svgautocrop.svg.parser import parse_svg
from svgautocrop.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

# A plugin name, or (name, params)
PluginEntry = Union[str, tuple[str, Any]]


@dataclass
class PipelineConfig:
    """Controls how many passes run and how output is written."""

    multipass: bool = field(default_factory=lambda: settings.multipass)
    max_passes: int = field(default_factory=lambda: settings.max_passes)
    pretty: bool = field(default_factory=lambda: settings.pretty)


@dataclass
class PipelineResult:
    data: str
    passes: int


class Pipeline:
    """Runs the configured plugins in order, once per pass, up to a fixed point."""

    def __init__(
        self,
        plugins: list[PluginEntry],
        registry: PluginRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()
        self.plugins: list[tuple[PluginSpec, Any]] = []
        for entry in plugins:
            name, params = (entry, None) if isinstance(entry, str) else entry
            spec = self.registry.get(name)
            # Validate once up front so bad parameters fail before any pass runs
            self.plugins.append((spec, spec.validate_params(params)))

    def run(self, svg_text: str, path: str | None = None) -> PipelineResult:
        """Optimize ``svg_text``. Errors from any plugin abort the run."""
        start = time.perf_counter()
        root = parse_svg(svg_text, path)
        max_passes = max(1, self.config.max_passes) if self.config.multipass else 1

        previous = serialize_svg(root, pretty=self.config.pretty)
        passes = 0
        for pass_index in range(max_passes):
            info = PassInfo(pass_index=pass_index, source_path=path)
            for spec, params in self.plugins:
                t0 = time.perf_counter()
                spec.fn(root, params, info)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s pass %d completed in %.1fms", spec.name, pass_index, elapsed)
            passes += 1

            output = serialize_svg(root, pretty=self.config.pretty)
            if output == previous:
                break
            previous = output

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d plugins, %d passes in %.0fms (%s)",
            len(self.plugins),
            passes,
            total,
            path or "<string>",
        )
        return PipelineResult(data=previous, passes=passes)
