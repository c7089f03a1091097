"""Autocrop pass: crop the viewBox to the visible content and move it to the origin.

Flow per invocation:
    resolve viewport -> (first pass) render and measure visible bounds -> padding
    -> translate/cleanup/recolor under a snapshot -> commit viewBox and width/height

Only the first pass renders. Later passes reuse the committed viewBox, so once
the content sits at (0, 0) a repeated run changes nothing.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from svgautocrop.engine.bounds import visible_viewport
from svgautocrop.engine.context import PassInfo, Viewport
from svgautocrop.engine.outcome import Deferral, Fatal
from svgautocrop.engine.recolor import recolor
from svgautocrop.engine.registry import plugin
from svgautocrop.engine.translate import translate
from svgautocrop.errors import AutocropError, DocumentStructureError, InvalidParameterError
from svgautocrop.models.params import AutocropParams, PaddingEdges
from svgautocrop.svg.cleanup import remove_class, remove_deprecated, remove_style
from svgautocrop.svg.serializer import serialize_svg
from svgautocrop.svg.tree import Root
from svgautocrop.utils.coerce import ensure_integer
from svgautocrop.utils.rasterizer import Rasterizer

logger = logging.getLogger(__name__)

_VIEW_BOX_SPLIT_RE = re.compile(r"[ ,]+")


def resolve_viewport(attributes: Mapping[str, str]) -> Viewport:
    """Viewport from ``viewBox``, falling back to ``width``/``height`` at the origin."""
    view_box = attributes.get("viewBox")
    if view_box:
        parts = _VIEW_BOX_SPLIT_RE.split(view_box.strip())
        if len(parts) != 4:
            raise DocumentStructureError(
                f"[/svg/@viewBox] Invalid attribute. Expected viewBox to specify 4 parts, got {view_box!r}",
                attribute="viewBox", value=view_box,
            )
        x, y, width, height = (
            ensure_integer(part, f"/svg/@viewBox#{i}") for i, part in enumerate(parts)
        )
        return Viewport(x, y, width, height)
    return Viewport(
        0,
        0,
        ensure_integer(attributes.get("width"), "/svg/@width"),
        ensure_integer(attributes.get("height"), "/svg/@height"),
    )


def apply_padding(
    new: Viewport,
    old: Viewport,
    root: Root,
    params: AutocropParams,
    info: PassInfo,
) -> None:
    """Grow ``new`` in place by the configured padding."""
    padding = params.padding
    if padding is None:
        return
    if isinstance(padding, int):
        new.x -= padding
        new.y -= padding
        new.width += padding * 2
        new.height += padding * 2
    elif isinstance(padding, PaddingEdges):
        new.x -= padding.left
        new.y -= padding.top
        new.width += padding.left + padding.right
        new.height += padding.top + padding.bottom
    else:
        padding(new, old, root, params, info)
        for field in ("x", "y", "width", "height"):
            setattr(new, field, ensure_integer(
                getattr(new, field), f"padding callback viewport.{field}", InvalidParameterError,
            ))


def _rewrite(root: Root, params: AutocropParams, new: Viewport, info: PassInfo) -> None:
    """Translate to the origin, run cleanups, then recolor; roll back on failure."""
    snapshot = root.clone_children()

    if new.origin != (0, 0):
        outcome = translate(root, -new.x, -new.y, info.pass_index)
        if isinstance(outcome, Fatal):
            root.restore(snapshot)
            raise outcome.error
        if isinstance(outcome, Deferral):
            root.restore(snapshot)
            log = logger.debug if params.disable_translate_warning else logger.warning
            log(
                "Failed to translate <svg> by (%d, %d): %s. The viewBox keeps its "
                "top-left at (%d, %d); set disableTranslateWarning to hide this message",
                -new.x, -new.y, outcome.reason, new.x, new.y,
            )
            return
        new.x = 0
        new.y = 0

    if params.remove_class:
        remove_class(root)
    if params.remove_style:
        remove_style(root)
    if params.remove_deprecated:
        remove_deprecated(root)

    if params.set_color:
        svg = root.root_element()
        svg_snapshot = svg.clone()
        outcome = recolor(svg, params.set_color, params.set_color_issue)
        if isinstance(outcome, Fatal):
            root.restore(snapshot)
            raise outcome.error
        if isinstance(outcome, Deferral):
            root.replace_child(svg, svg_snapshot)
            logger.warning("Recolor to %s rolled back: %s", params.set_color, outcome.reason)


@plugin(name="autocrop", params_model=AutocropParams)
def autocrop(
    root: Root,
    params: AutocropParams | Mapping[str, Any] | None = None,
    info: PassInfo | None = None,
    *,
    rasterize: Rasterizer | None = None,
) -> None:
    """Crop the viewBox to the visible content, optionally translating it to (0, 0).

    Mutates ``root`` in place. Classified failures raise :class:`AutocropError`
    subclasses after the tree has been restored to its pre-rewrite state.
    """
    if not isinstance(params, AutocropParams):
        params = AutocropParams.model_validate(params or {})
    info = info or PassInfo()

    try:
        svg = root.root_element()
        attrs = svg.attributes
        dimensions_present = bool(attrs.get("width") or attrs.get("height"))

        viewport = resolve_viewport(attrs)
        logger.debug("Resolved viewport %s (pass %d)", viewport, info.pass_index)

        # The renderer sizes its output from width/height
        attrs["width"] = str(viewport.width)
        attrs["height"] = str(viewport.height)

        if info.pass_index == 0 and params.autocrop:
            new = visible_viewport(serialize_svg(root), viewport, rasterize)
            apply_padding(new, viewport, root, params, info)
        else:
            new = viewport.copy()

        if not params.disable_translate:
            _rewrite(root, params, new, info)

        # The rewrite may have swapped the root element for a snapshot
        attrs = root.root_element().attributes
        attrs["viewBox"] = new.to_view_box()
        include = params.include_width_and_height_attributes
        if dimensions_present if include is None else include:
            attrs["width"] = str(new.width)
            attrs["height"] = str(new.height)
        else:
            attrs.pop("width", None)
            attrs.pop("height", None)
    except AutocropError as e:
        if e.source_path is None:
            e.source_path = info.source_path
        logger.error("Failed to process: %s", info.source_path or "<string>")
        raise
