"""Element rewrite engine: shift every coordinate in the document by ``(dx, dy)``.

Dispatch is whitelist driven. Each supported tag maps attribute names to a
handler; a small set of presentation attributes passes through on every tag.
Anything not listed is reported as unhandled, never silently dropped.

Transforms and un-normalized shapes (polyline, polygon) are expected to be
rewritten by earlier passes. On the first pass they defer; afterwards they are
fatal because the normalizing pass is evidently missing from the pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from svgautocrop.engine.outcome import SUCCESS, Deferral, Fatal, Outcome, Success
from svgautocrop.errors import DocumentStructureError, UnhandledConstructError
from svgautocrop.svg.pathdata import PathDataError, translate_path_data
from svgautocrop.svg.tree import ROOT_TAG, Comment, Doctype, Element, Instruction, Root
from svgautocrop.utils.coerce import format_number, parse_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Offset:
    dx: float
    dy: float
    pass_index: int


Handler = Callable[[Element, str, _Offset], Outcome]


# ── Attribute handlers ──

def _keep(element: Element, name: str, offset: _Offset) -> Outcome:
    return SUCCESS


def _shift(element: Element, name: str, delta: float) -> Outcome:
    value = element.attributes[name]
    number = parse_number(value)
    if number is None:
        return Fatal(DocumentStructureError(
            f"Attribute {name}={value!r} is not a number",
            element=element.describe(), attribute=name, value=value,
        ))
    if delta:
        element.attributes[name] = format_number(number + delta)
    return SUCCESS


def _shift_x(element: Element, name: str, offset: _Offset) -> Outcome:
    return _shift(element, name, offset.dx)


def _shift_y(element: Element, name: str, offset: _Offset) -> Outcome:
    return _shift(element, name, offset.dy)


def _path_data(element: Element, name: str, offset: _Offset) -> Outcome:
    value = element.attributes[name]
    try:
        element.attributes[name] = translate_path_data(value, offset.dx, offset.dy)
    except PathDataError as e:
        return Fatal(UnhandledConstructError(
            f"Cannot translate path data: {e}",
            element=element.describe(), attribute=name, value=value,
        ))
    return SUCCESS


def _root_position(element: Element, name: str, offset: _Offset) -> Outcome:
    value = element.attributes[name]
    if value.strip() in ("", "0", "0px"):
        del element.attributes[name]
        return SUCCESS
    return _unhandled_attribute(element, name)


def _needs_normalization(element: Element, what: str, fix: str, pass_index: int) -> Outcome:
    if pass_index == 0:
        return Deferral(f"{element.describe()} {what}; autocrop will retry once {fix} has run")
    return Fatal(UnhandledConstructError(
        f"Element {what} on pass {pass_index}; {fix} must run before autocrop in the pipeline",
        element=element.describe(),
    ))


def _transform(element: Element, name: str, offset: _Offset) -> Outcome:
    return _needs_normalization(
        element,
        f"has an unresolved transform={element.attributes[name]!r}",
        "transform flattening",
        offset.pass_index,
    )


def _unhandled_attribute(element: Element, name: str) -> Outcome:
    value = element.attributes[name]
    return Fatal(UnhandledConstructError(
        f"Unhandled attribute {name}={value!r} on <{element.name}>",
        element=element.describe(), attribute=name, value=value,
    ))


# ── Dispatch tables ──

_ELEMENT_ATTRIBUTES: dict[str, dict[str, Handler]] = {
    ROOT_TAG: {
        "viewBox": _keep,
        "width": _keep,
        "height": _keep,
        "xmlns": _keep,
        "preserveAspectRatio": _keep,
        "enable-background": _keep,
        "x": _root_position,
        "y": _root_position,
    },
    "g": {},
    "defs": {},
    "path": {"d": _path_data},
    "rect": {"x": _shift_x, "y": _shift_y, "width": _keep, "height": _keep, "rx": _keep, "ry": _keep},
    "line": {"x1": _shift_x, "x2": _shift_x, "y1": _shift_y, "y2": _shift_y},
    "circle": {"cx": _shift_x, "cy": _shift_y, "r": _keep},
    "ellipse": {"cx": _shift_x, "cy": _shift_y, "rx": _keep, "ry": _keep},
}

# Elements with no geometry; skipped along with their content
_IGNORED_ELEMENTS = frozenset({"title", "desc"})

# Shapes an earlier pass converts to <path>
_UNCONVERTED_SHAPES = frozenset({"polyline", "polygon"})

# Elements whose children are walked; every other supported element must be childless
_CONTAINERS = frozenset({ROOT_TAG, "g", "defs"})

# Accepted unchanged on every supported element
_COMMON_ATTRIBUTES = frozenset({
    # paint, handled by the recolor engine
    "fill", "stroke", "color", "stop-color", "flood-color", "lighting-color",
    # cosmetic, handled by cleanup
    "class", "style", "font-family", "overflow",
    # deprecated, handled by cleanup
    "version", "baseProfile", "enable-background", "data-name", "xml:space", "xmlns:sketch",
    # identifiers and rendering hints
    "id", "opacity", "display", "visibility", "role", "tabindex", "focusable",
    "pointer-events", "shape-rendering", "color-rendering", "text-rendering",
    "image-rendering", "vector-effect", "paint-order",
})
_COMMON_PREFIXES = ("fill-", "stroke-", "clip-", "aria-", "data-", "xmlns:", "xml:", "sketch:")


def _handler_for(tag: str, name: str) -> Handler | None:
    handler = _ELEMENT_ATTRIBUTES[tag].get(name)
    if handler is not None:
        return handler
    if name == "transform":
        return _transform
    if name in _COMMON_ATTRIBUTES or name.startswith(_COMMON_PREFIXES):
        return _keep
    return None


# ── Tree walk ──

def _translate_element(element: Element, offset: _Offset) -> Outcome:
    tag = element.name
    if tag in _IGNORED_ELEMENTS:
        return SUCCESS
    if tag in _UNCONVERTED_SHAPES:
        return _needs_normalization(
            element, f"is a <{tag}>", "shape-to-path conversion", offset.pass_index
        )
    if tag not in _ELEMENT_ATTRIBUTES:
        return Fatal(UnhandledConstructError(
            f"Unhandled element <{tag}>", element=element.describe(),
        ))

    for name in list(element.attributes):
        handler = _handler_for(tag, name)
        outcome = handler(element, name, offset) if handler else _unhandled_attribute(element, name)
        if not isinstance(outcome, Success):
            return outcome

    if tag not in _CONTAINERS and element.children:
        return Fatal(UnhandledConstructError(
            f"Unexpected children inside <{tag}>", element=element.describe(),
        ))

    if tag == "defs" and any(isinstance(c, Element) for c in element.children):
        return Fatal(UnhandledConstructError(
            "Populated <defs> is not supported; only an empty <defs> can be translated",
            element=element.describe(),
        ))

    for child in element.children:
        if isinstance(child, Element):
            outcome = _translate_element(child, offset)
            if not isinstance(outcome, Success):
                return outcome
        elif not isinstance(child, Comment):
            return Fatal(UnhandledConstructError(
                f"Unhandled {child.type} node inside <{tag}>", element=element.describe(),
            ))
    return SUCCESS


def translate(root: Root, dx: float, dy: float, pass_index: int = 0) -> Outcome:
    """Shift all geometry below the single root ``<svg>`` by ``(dx, dy)`` in place.

    Returns ``Deferral`` for constructs an upstream pass still has to normalize
    (first pass only) and ``Fatal`` for anything outside the whitelist. The tree
    may be partially rewritten when a non-success outcome is returned; callers
    restore their snapshot.
    """
    try:
        svg = root.root_element()
    except DocumentStructureError as e:
        return Fatal(e)

    for child in root.children:
        if child is svg or isinstance(child, (Comment, Instruction, Doctype)):
            continue
        if isinstance(child, Element):
            return Fatal(UnhandledConstructError(
                f"Unhandled top-level element <{child.name}>", element=child.describe(),
            ))
        return Fatal(UnhandledConstructError(f"Unhandled top-level {child.type} node"))

    logger.debug("Translating by (%s, %s) on pass %d", dx, dy, pass_index)
    return _translate_element(svg, _Offset(dx, dy, pass_index))
