"""Cosmetic cleanup sub-passes: class, style and deprecated attribute stripping.

Each function walks every element below the root and deletes attributes in place.
"""

from __future__ import annotations

import logging

from svgautocrop.svg.tree import Element, Root

logger = logging.getLogger(__name__)

_STYLE_ATTRS = ("style", "font-family")

# Attributes dropped by svg exporters that have no effect on rendering
_DEPRECATED_ATTRS = frozenset({
    "version",
    "baseProfile",
    "enable-background",
    "data-name",
    "xml:space",
    "xmlns:sketch",
})
_DEPRECATED_PREFIXES = ("sketch:",)


def _elements(root: Root) -> list[Element]:
    found: list[Element] = []
    for child in root.children:
        if isinstance(child, Element):
            found.extend(child.iter())
    return found


def _drop(element: Element, name: str) -> int:
    if name in element.attributes:
        del element.attributes[name]
        return 1
    return 0


def remove_class(root: Root) -> int:
    """Delete every ``class`` attribute. Returns the number removed."""
    removed = sum(_drop(el, "class") for el in _elements(root))
    logger.debug("remove_class: %d attributes", removed)
    return removed


def remove_style(root: Root) -> int:
    """Delete ``style``, ``font-family`` and a default (empty or ``visible``) ``overflow``."""
    removed = 0
    for el in _elements(root):
        for name in _STYLE_ATTRS:
            removed += _drop(el, name)
        if "overflow" in el.attributes and el.attributes["overflow"].strip() in ("", "visible"):
            removed += _drop(el, "overflow")
    logger.debug("remove_style: %d attributes", removed)
    return removed


def is_deprecated_attribute(name: str) -> bool:
    return name in _DEPRECATED_ATTRS or name.startswith(_DEPRECATED_PREFIXES)


def remove_deprecated(root: Root) -> int:
    """Delete exporter leftovers (``version``, ``data-name``, ``sketch:*`` ...)."""
    removed = 0
    for el in _elements(root):
        for name in [n for n in el.attributes if is_deprecated_attribute(n)]:
            removed += _drop(el, name)
    logger.debug("remove_deprecated: %d attributes", removed)
    return removed
