# W++ parser implementation

from __future__ import annotations

import logging
import re
from typing import Dict, List

from wpp_struct import Attribute, Document, ErrorKind, ExtendedDocument, Node, WPPError

logger = logging.getLogger(__name__)

# -----------------------------
# Whitespace normalization

# the capture group keeps quoted literals in re.split() output, at odd indexes
_QUOTED_RE = re.compile(r'("[^"]*")')

# `) name(` / `}] [name(`: the whitespace run is the only token boundary
# left once indentation and newlines are gone.
_BOUNDARY_RE = re.compile(r"([)}][^\s({]*)\s+(?=[^\s({]+[({])")
_WHITESPACE_RE = re.compile(r"\s+")

# placeholder for preserved boundary spaces while the rest is stripped
_BOUNDARY_MARK = "\x00"


def _squeeze(segment: str) -> str:
    segment = _BOUNDARY_RE.sub(lambda m: m.group(1) + _BOUNDARY_MARK, segment)
    return _WHITESPACE_RE.sub("", segment).replace(_BOUNDARY_MARK, " ")


def remove_extra_spaces(text: str) -> str:
    """
    Collapse formatting whitespace outside quoted values.

      [Persona("Alice"){
          age("30")
          likes("cats"+"dogs")
      }]
        ->
      [Persona("Alice"){age("30") likes("cats"+"dogs")}]

    Carriage returns are dropped everywhere. A single space survives after
    `)` or `}` when a new attribute or group follows it. Everything between
    quotes is kept as written.
    """
    parts = _QUOTED_RE.split(text.replace("\r", ""))
    return "".join(p if i % 2 else _squeeze(p) for i, p in enumerate(parts))


# -----------------------------
# Attributes

_ATTRIBUTE_RE = re.compile(r"[^(]*\([^)]*\)")


def _unquote(value: str) -> str:
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def break_attribute(text: str) -> Attribute:
    """
    Split a single `name("v1"+"v2")` token into its name and unquoted values.

    Only one pair of parentheses is allowed. Exactly one quote is stripped
    from each side of every value; quotes are not required.
    """
    text = text.strip()
    if not _ATTRIBUTE_RE.fullmatch(text):
        raise WPPError(ErrorKind.BAD_ATTRIBUTE, text)
    name, _, rest = text.partition("(")
    values = [_unquote(v) for v in rest[:-1].split("+")]
    return Attribute(name=name, value=values)


# -----------------------------
# Groups

# groups never nest, so the first `}` always closes the group
_GROUP_RE = re.compile(r"\[?[^}]*}\]?")
_PROPERTY_RE = re.compile(r"[^),][^)]*\)")


def _build_node(index: int, fragment: str) -> Node:
    head, brace, rest = fragment.partition("{")
    type_segment = head.strip()
    if type_segment.startswith("["):
        type_segment = type_segment[1:]
    if not type_segment:
        raise WPPError(ErrorKind.NO_TYPE, index)

    type_attr = break_attribute(type_segment)
    if len(type_attr.value) > 1:
        raise WPPError(ErrorKind.TYPE_HAS_MULTIPLE_NAMES, type_segment)

    properties: Dict[str, List[str]] = {}
    body = rest[: rest.rfind("}")] if brace else ""
    for token in _PROPERTY_RE.findall(body):
        attr = break_attribute(token)
        if attr.name in properties:
            # repeated keys inside one group concatenate, duplicates included
            properties[attr.name] = properties[attr.name] + attr.value
        else:
            properties[attr.name] = attr.value

    return Node(type=type_attr.name, name=type_attr.value[0], properties=properties)


def parse(text: str) -> Document:
    """
    Parse W++ text into a list of nodes, in the order the groups appear.

    Raises WPPError on the first malformed group; nothing is returned for the
    groups that did parse.
    """
    text = remove_extra_spaces(text)
    fragments = _GROUP_RE.findall(text)
    if not fragments:
        raise WPPError(ErrorKind.NO_GROUPS)

    doc = [_build_node(i, fragment) for i, fragment in enumerate(fragments)]
    logger.debug("parsed %d W++ group(s)", len(doc))
    return doc


# -----------------------------
# Extended documents (groups + free text)

_SPAN_RE = re.compile(r"[\[{][^\]}]*[\]}]\]?")
_BLANK_LINES_RE = re.compile(r"^\s*[\r\n]", re.MULTILINE)


def parse_extended(text: str) -> ExtendedDocument:
    """
    Parse text that mixes W++ groups with free-form prose.

    Group spans are parsed as W++; whatever is left over becomes the
    appendix, with blank-line runs collapsed to a single newline.
    """
    appendix = _BLANK_LINES_RE.sub("\n", _SPAN_RE.sub("", text))
    spans = _SPAN_RE.findall(text)
    wpp = parse("\n".join(spans)) if spans else []
    logger.debug("extended parse: %d group span(s), appendix %d char(s)", len(spans), len(appendix))
    return ExtendedDocument(
        wpp=wpp,
        appendix=appendix if appendix.strip() else None,
    )
