"""SVG parser: markup text to :class:`Root`.

Built on the expat tokenizer with namespace processing disabled, so qualified
attribute names (``xmlns:sketch``, ``sketch:type``) survive verbatim and in order.
"""

from __future__ import annotations

import logging
from xml.parsers import expat

from svgautocrop.errors import DocumentStructureError
from svgautocrop.svg.tree import Comment, Doctype, Element, Instruction, Node, Root, Text

logger = logging.getLogger(__name__)

# Whitespace is significant inside these; everywhere else whitespace-only text is dropped.
_TEXT_CONTENT_ELEMENTS = frozenset({"text", "tspan", "textPath", "title", "desc", "style", "script"})


class _TreeBuilder:
    """Collects expat callbacks into a Root."""

    def __init__(self) -> None:
        self.root = Root()
        self._stack: list[Root | Element] = [self.root]
        self._text: list[str] = []
        self._in_cdata = False

    def _parent(self) -> Root | Element:
        return self._stack[-1]

    def _append(self, node: Node) -> None:
        self._parent().children.append(node)

    def flush_text(self) -> None:
        if not self._text:
            return
        value = "".join(self._text)
        self._text = []
        parent = self._parent()
        keep_ws = isinstance(parent, Element) and parent.name in _TEXT_CONTENT_ELEMENTS
        if not value.strip() and not keep_ws:
            return
        if isinstance(parent, Root):
            # Stray text outside the root element is not part of the document.
            return
        self._append(Text(value, cdata=self._in_cdata))

    # ── expat handlers ──

    def xml_decl(self, version: str | None, encoding: str | None, standalone: int) -> None:
        parts = []
        if version:
            parts.append(f'version="{version}"')
        if encoding:
            parts.append(f'encoding="{encoding}"')
        if standalone != -1:
            parts.append(f'standalone="{"yes" if standalone else "no"}"')
        self._append(Instruction("xml", " ".join(parts)))

    def start_doctype(self, name: str, system_id: str | None, public_id: str | None, _subset: int) -> None:
        value = name
        if public_id:
            value += f' PUBLIC "{public_id}"'
            if system_id:
                value += f' "{system_id}"'
        elif system_id:
            value += f' SYSTEM "{system_id}"'
        self._append(Doctype(value))

    def start_element(self, name: str, attrs: list[str]) -> None:
        self.flush_text()
        attributes = dict(zip(attrs[0::2], attrs[1::2]))
        element = Element(name, attributes)
        self._append(element)
        self._stack.append(element)

    def end_element(self, _name: str) -> None:
        self.flush_text()
        self._stack.pop()

    def characters(self, data: str) -> None:
        self._text.append(data)

    def start_cdata(self) -> None:
        self.flush_text()
        self._in_cdata = True

    def end_cdata(self) -> None:
        self.flush_text()
        self._in_cdata = False

    def comment(self, data: str) -> None:
        self.flush_text()
        self._append(Comment(data))

    def instruction(self, target: str, data: str) -> None:
        self.flush_text()
        self._append(Instruction(target, data))


def parse_svg(svg_text: str, path: str | None = None) -> Root:
    """Parse raw SVG markup into a document tree.

    Raises:
        DocumentStructureError: the markup is not well-formed XML.
    """
    builder = _TreeBuilder()
    parser = expat.ParserCreate()
    parser.ordered_attributes = True
    parser.buffer_text = True
    parser.XmlDeclHandler = builder.xml_decl
    parser.StartDoctypeDeclHandler = builder.start_doctype
    parser.StartElementHandler = builder.start_element
    parser.EndElementHandler = builder.end_element
    parser.CharacterDataHandler = builder.characters
    parser.StartCdataSectionHandler = builder.start_cdata
    parser.EndCdataSectionHandler = builder.end_cdata
    parser.CommentHandler = builder.comment
    parser.ProcessingInstructionHandler = builder.instruction

    try:
        # The XML declaration must be the very first thing in the entity.
        parser.Parse(svg_text.strip(), True)
    except expat.ExpatError as e:
        raise DocumentStructureError(
            f"Malformed SVG markup: {e}", source_path=path
        ) from e

    logger.debug("Parsed %s: %d top-level nodes", path or "<string>", len(builder.root.children))
    return builder.root
