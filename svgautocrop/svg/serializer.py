"""Write SVG markup from a document tree."""

from __future__ import annotations

from svgautocrop.svg.tree import Comment, Doctype, Element, Instruction, Node, Root, Text

_ATTR_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})
_TEXT_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})


def serialize_svg(node: Root | Element, pretty: bool = False, indent: str = "  ") -> str:
    """Serialize a whole document or a single element subtree.

    Compact output puts everything on one line. Pretty output puts each element
    on its own line; elements whose only children are text stay on one line.
    """
    lines: list[str] = []
    children = node.children if isinstance(node, Root) else [node]
    for child in children:
        _write(child, lines, pretty, indent, 0)
    return ("\n" if pretty else "").join(lines)


def _write(node: Node, lines: list[str], pretty: bool, indent: str, depth: int) -> None:
    pad = indent * depth if pretty else ""
    if isinstance(node, Element):
        if pretty and node.children and not all(isinstance(c, Text) for c in node.children):
            lines.append(pad + _start_tag(node) + ">")
            for child in node.children:
                _write(child, lines, pretty, indent, depth + 1)
            lines.append(f"{pad}</{node.name}>")
        else:
            lines.append(pad + _compact_element(node))
    elif isinstance(node, Text):
        lines.append(pad + _text(node))
    else:
        lines.append(pad + _leaf(node))


def _start_tag(element: Element) -> str:
    attrs = "".join(
        f' {name}="{value.translate(_ATTR_ESCAPES)}"' for name, value in element.attributes.items()
    )
    return f"<{element.name}{attrs}"


def _compact_element(element: Element) -> str:
    if not element.children:
        return _start_tag(element) + "/>"
    inner = []
    for child in element.children:
        if isinstance(child, Element):
            inner.append(_compact_element(child))
        elif isinstance(child, Text):
            inner.append(_text(child))
        else:
            inner.append(_leaf(child))
    return f"{_start_tag(element)}>{''.join(inner)}</{element.name}>"


def _text(node: Text) -> str:
    if node.cdata:
        return f"<![CDATA[{node.value}]]>"
    return node.value.translate(_TEXT_ESCAPES)


def _leaf(node: Comment | Instruction | Doctype) -> str:
    if isinstance(node, Comment):
        return f"<!--{node.value}-->"
    if isinstance(node, Instruction):
        return f"<?{node.name} {node.value}?>" if node.value else f"<?{node.name}?>"
    return f"<!DOCTYPE {node.value}>"
