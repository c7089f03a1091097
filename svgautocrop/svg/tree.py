"""In-memory document tree that every pass mutates in place.

Node kinds: Root, Element, Text, Comment, Instruction, Doctype. Attribute names are
kept verbatim (``xmlns:sketch``, ``sketch:type``, ``xml:space``) and in source order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from svgautocrop.errors import DocumentStructureError

ROOT_TAG = "svg"

# Start tags longer than this are cut in diagnostics.
_DESCRIBE_LIMIT = 120


@dataclass
class Text:
    value: str
    cdata: bool = False

    type = "text"

    def clone(self) -> Text:
        return Text(self.value, self.cdata)


@dataclass
class Comment:
    value: str

    type = "comment"

    def clone(self) -> Comment:
        return Comment(self.value)


@dataclass
class Instruction:
    """Processing instruction, including the ``<?xml ...?>`` declaration."""

    name: str
    value: str

    type = "instruction"

    def clone(self) -> Instruction:
        return Instruction(self.name, self.value)


@dataclass
class Doctype:
    value: str

    type = "doctype"

    def clone(self) -> Doctype:
        return Doctype(self.value)


@dataclass
class Element:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    type = "element"

    def clone(self) -> Element:
        """Structural deep copy of this subtree."""
        return Element(
            self.name,
            dict(self.attributes),
            [child.clone() for child in self.children],
        )

    def elements(self) -> Iterator[Element]:
        """Child elements in document order."""
        for child in self.children:
            if isinstance(child, Element):
                yield child

    def iter(self) -> Iterator[Element]:
        """This element and every descendant element, depth-first in document order."""
        yield self
        for child in self.elements():
            yield from child.iter()

    def describe(self) -> str:
        """Start tag for diagnostics, e.g. ``<rect x="5" y="5">``."""
        attrs = "".join(f' {k}="{v}"' for k, v in self.attributes.items())
        tag = f"<{self.name}{attrs}>"
        if len(tag) > _DESCRIBE_LIMIT:
            tag = tag[: _DESCRIBE_LIMIT - 4] + " ...>"
        return tag


Node = Union[Element, Text, Comment, Instruction, Doctype]


@dataclass
class Root:
    children: list[Node] = field(default_factory=list)

    type = "root"

    def clone(self) -> Root:
        return Root(self.clone_children())

    def clone_children(self) -> list[Node]:
        """Snapshot of the whole document below the root."""
        return [child.clone() for child in self.children]

    def restore(self, snapshot: list[Node]) -> None:
        """Replace the document with a snapshot taken by :meth:`clone_children`."""
        self.children = snapshot

    def replace_child(self, old: Node, new: Node) -> None:
        for i, child in enumerate(self.children):
            if child is old:
                self.children[i] = new
                return
        raise ValueError(f"{old!r} is not a child of this root")

    def root_element(self) -> Element:
        """The single top-level ``<svg>`` element."""
        if not self.children:
            raise DocumentStructureError("Document contains no nodes")
        svgs = [c for c in self.children if isinstance(c, Element) and c.name == ROOT_TAG]
        if not svgs:
            raise DocumentStructureError("Document doesn't contain a root <svg> element")
        if len(svgs) > 1:
            raise DocumentStructureError(
                f"Document contains {len(svgs)} root <svg> elements, expected exactly one"
            )
        return svgs[0]
