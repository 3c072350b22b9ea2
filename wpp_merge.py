# W++ merge and trim

from __future__ import annotations

import logging
from typing import Any, List, Optional

from wpp_conversion import to_document, to_extended
from wpp_struct import Document, ExtendedDocument, Node

logger = logging.getLogger(__name__)


def _is_empty(wpp: Any) -> bool:
    return wpp is None or (isinstance(wpp, (list, tuple, str)) and len(wpp) == 0)


def _merge_values(existing: List[str], incoming: List[str]) -> List[str]:
    # exact string match, first occurrence wins
    return list(dict.fromkeys(existing + incoming))


def _absorb(acceptor: Node, donor: Node) -> None:
    for key, values in donor.properties.items():
        if key in acceptor.properties:
            acceptor.properties[key] = _merge_values(acceptor.properties[key], values)
        else:
            acceptor.properties[key] = list(values)


def get_merged(acceptor: Any, donor: Any) -> Document:
    """
    Merge `donor` into `acceptor` and return the result as a new document.

    Nodes are matched by (type, name). Values of the acceptor come first
    and are never dropped; donor values are appended once each. Every donor
    node is consumed by at most one acceptor node, and unmatched donor
    nodes are appended at the end. Acceptor nodes without a type or a name
    are passed through and never consume a donor node.

    Neither argument is modified.
    """
    if _is_empty(acceptor) and _is_empty(donor):
        return []
    if _is_empty(donor):
        return to_document(acceptor)
    if _is_empty(acceptor):
        return to_document(donor)

    merged = to_document(acceptor)
    remaining = to_document(donor)

    for node in merged:
        if not node.type or not node.name:
            continue
        for j, candidate in enumerate(remaining):
            if candidate.type == node.type and candidate.name == node.name:
                _absorb(node, candidate)
                del remaining[j]
                logger.debug("merged donor node %s(%r)", node.type, node.name)
                break

    return merged + remaining


def _join_appendix(first: Optional[str], second: Optional[str]) -> Optional[str]:
    parts = [p for p in (first, second) if p]
    return "\n".join(parts) or None


def get_merged_extended(acceptor: Any, donor: Any) -> ExtendedDocument:
    """Merge two extended documents: groups via get_merged, appendices joined by a newline."""
    first = to_extended(acceptor)
    second = to_extended(donor)
    return ExtendedDocument(
        wpp=get_merged(first.wpp, second.wpp),
        appendix=_join_appendix(first.appendix, second.appendix),
    )


def trim(wpp: Any) -> Document:
    """Return a copy of the document without nodes that have no name."""
    return [node for node in to_document(wpp) if node.name]
