"""Recolor engine: rewrite every paint attribute in a subtree to one target color."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import get_args

from svgautocrop.engine.outcome import SUCCESS, Deferral, Fatal, Outcome, Success
from svgautocrop.errors import ColorConflictError, InvalidParameterError
from svgautocrop.models.params import ColorIssuePolicy
from svgautocrop.svg.tree import Element, Root

logger = logging.getLogger(__name__)

PAINT_ATTRIBUTES = ("color", "fill", "flood-color", "lighting-color", "stop-color", "stroke")

CURRENT_COLOR = "currentcolor"

_POLICIES = frozenset(get_args(ColorIssuePolicy))


@dataclass
class _RecolorState:
    """Accumulator threaded through the walk."""

    target: str
    on_conflict: str
    # Lowercased first color value met in document order
    first_seen: str | None = None


def _recolor_attribute(element: Element, name: str, state: _RecolorState) -> Outcome:
    raw = element.attributes[name]
    value = raw.strip().lower()

    if value == "none":
        return SUCCESS
    if not value:
        del element.attributes[name]
        return SUCCESS
    if name == "color" and (value == state.target.lower() or state.target.lower() == CURRENT_COLOR):
        # color only feeds currentColor; pointing it at the target is a no-op
        del element.attributes[name]
        return SUCCESS

    if state.first_seen is None:
        state.first_seen = value
    elif value != state.first_seen:
        outcome = _conflict(element, name, raw, state)
        if outcome is not None:
            return outcome

    element.attributes[name] = state.target
    return SUCCESS


def _conflict(element: Element, name: str, raw: str, state: _RecolorState) -> Outcome | None:
    policy = state.on_conflict
    if policy == "ignore":
        return None
    if policy == "warn":
        logger.warning(
            "Found more than one color (%s after %s) in %s=%r on %s; converting to %s anyway",
            raw.strip(), state.first_seen, name, raw, element.describe(), state.target,
        )
        return None
    message = (
        f"Found more than one color: {raw.strip()!r} in {name} after {state.first_seen!r}"
    )
    if policy == "fail":
        return Fatal(ColorConflictError(
            f"{message}; set setColorIssue to warn or ignore to convert anyway",
            element=element.describe(), attribute=name, value=raw,
        ))
    return Deferral(f"{message} on {element.describe()}; recoloring rolled back")


def _walk(element: Element, state: _RecolorState) -> Outcome:
    # Attribute order is document order; deletions happen while walking
    for name in [n for n in element.attributes if n in PAINT_ATTRIBUTES]:
        outcome = _recolor_attribute(element, name, state)
        if not isinstance(outcome, Success):
            return outcome
    for child in element.elements():
        outcome = _walk(child, state)
        if not isinstance(outcome, Success):
            return outcome
    return SUCCESS


def recolor(element: Element, color: str, on_conflict: str = "warn") -> Outcome:
    """Set every paint attribute below ``element`` to ``color``.

    ``none`` is preserved and empty values are removed. If the subtree carries
    no paint at all, ``fill`` is set on ``element`` so the result still follows
    the target color.
    """
    if on_conflict not in _POLICIES:
        raise InvalidParameterError(
            f"Unknown color conflict policy {on_conflict!r}, expected one of {sorted(_POLICIES)}"
        )
    state = _RecolorState(color, on_conflict)
    outcome = _walk(element, state)
    if not isinstance(outcome, Success):
        return outcome
    if state.first_seen is None:
        element.attributes["fill"] = color
    return SUCCESS


def recolor_tree(root: Root, color: str, on_conflict: str = "warn") -> Outcome:
    """:func:`recolor` applied to the document's root ``<svg>``."""
    return recolor(root.root_element(), color, on_conflict)
