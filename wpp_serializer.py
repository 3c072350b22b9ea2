# W++ serialization

from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Union

from wpp_conversion import to_document, to_extended, to_node
from wpp_merge import trim
from wpp_parser import parse, remove_extra_spaces
from wpp_struct import Document, Node


class StringifyMode(str, Enum):
    NORMAL  = "normal"   # one attribute per line
    LINE    = "line"     # normal output with every newline removed
    COMPACT = "compact"  # normal output passed through remove_extra_spaces


def _render_property(key: str, values: List[str]) -> str:
    present = [v for v in values if v]
    return key + "(" + "+".join('"' + v + '"' for v in present) + ")"


def _render_node(node: Node) -> str:
    lines = ["[" + (node.type or "") + '("' + (node.name or "") + '"){']
    for key, values in node.properties.items():
        if not key and not any(values):
            continue
        lines.append(_render_property(key, values))
    lines.append("}]")
    return "\n".join(lines)


def stringify(wpp: Union[Document, Node, Mapping[str, Any]], mode: Union[StringifyMode, str] = StringifyMode.NORMAL) -> str:
    """
    Render nodes back to W++ text.

    A single node is accepted as a one-element document. Properties with an
    empty key and no non-empty values are dropped; empty values are left
    out of the rendered list.
    """
    mode = StringifyMode(mode)
    if isinstance(wpp, (list, tuple)):
        nodes = to_document(wpp)
    else:
        nodes = [to_node(wpp)]

    out = "\n".join(_render_node(n) for n in nodes)
    if mode == StringifyMode.LINE:
        return out.replace("\n", "")
    if mode == StringifyMode.COMPACT:
        return remove_extra_spaces(out)
    return out


def stringify_extended(wpp_x: Any, mode: Union[StringifyMode, str] = StringifyMode.NORMAL) -> str:
    """
    Render an extended document: named groups first, then the appendix verbatim.
    """
    mode = StringifyMode(mode)
    xdoc = to_extended(wpp_x)
    trimmed = trim(xdoc.wpp)
    rendered = stringify(trimmed, mode) if trimmed else ""
    return rendered + (xdoc.appendix or "")


def validate(wpp: Union[Document, Node]) -> Document:
    """Canonicalize a document by rendering it and parsing the result."""
    return parse(stringify(wpp))
