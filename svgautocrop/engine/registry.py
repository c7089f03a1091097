"""Plugin registry: every pass is a standalone function registered via decorator.

Usage:
    @plugin(name="autocrop", params_model=AutocropParams)
    def autocrop(root: Root, params: AutocropParams, info: PassInfo) -> None:
        ...

The pipeline looks passes up by name and validates their parameters with
``params_model`` before each call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel

if TYPE_CHECKING:
    from svgautocrop.engine.context import PassInfo
    from svgautocrop.svg.tree import Root

logger = logging.getLogger(__name__)

PluginFn = Callable[["Root", Any, "PassInfo"], None]


@dataclass
class PluginSpec:
    name: str
    fn: PluginFn
    description: str = ""
    params_model: type[BaseModel] | None = None

    def validate_params(self, params: Any) -> Any:
        """Coerce a raw mapping into the plugin's parameter model."""
        if self.params_model is None:
            return dict(params or {})
        if isinstance(params, self.params_model):
            return params
        return self.params_model.model_validate(params or {})


class PluginRegistry:
    """Name -> plugin lookup."""

    def __init__(self) -> None:
        self._plugins: dict[str, PluginSpec] = {}

    def register(self, spec: PluginSpec) -> None:
        if spec.name in self._plugins:
            raise ValueError(f"Duplicate plugin name: {spec.name}")
        self._plugins[spec.name] = spec
        logger.debug("Registered plugin %s", spec.name)

    def get(self, name: str) -> PluginSpec:
        try:
            return self._plugins[name]
        except KeyError:
            raise KeyError(f"Unknown plugin {name!r}; registered: {self.names()}") from None

    def all(self) -> list[PluginSpec]:
        return sorted(self._plugins.values(), key=lambda s: s.name)

    def names(self) -> list[str]:
        return sorted(self._plugins)

    @property
    def count(self) -> int:
        return len(self._plugins)


# Module-level singleton
_registry = PluginRegistry()


def get_registry() -> PluginRegistry:
    return _registry


def plugin(
    *,
    name: str,
    description: str = "",
    params_model: type[BaseModel] | None = None,
):
    """Decorator to register a pass function."""

    def decorator(fn: PluginFn):
        _registry.register(
            PluginSpec(
                name=name,
                fn=fn,
                description=description or (fn.__doc__ or "").strip().split("\n")[0],
                params_model=params_model,
            )
        )
        return fn

    return decorator
