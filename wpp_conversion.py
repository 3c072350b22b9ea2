# JSON conversion for W++ documents

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from wpp_struct import Document, ErrorKind, ExtendedDocument, Node, WPPError


def _text_from_json(d: Mapping[str, Any], key: str) -> str:
    v = d.get(key)
    if v is None:
        return ""
    if not isinstance(v, str):
        raise ValueError(f"node {key!r} must be a string, got {type(v).__name__}")
    return v


def _properties_from_json(raw: Any) -> Dict[str, List[str]]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ValueError("node 'properties' must be a mapping")
    out: Dict[str, List[str]] = {}
    for key, values in raw.items():
        if not isinstance(values, (list, tuple)):
            raise ValueError(f"property {key!r} must be a list of strings")
        for v in values:
            if v is not None and not isinstance(v, str):
                raise ValueError(f"property {key!r} holds a non-string value {v!r}")
        # None entries are kept; the serializer filters empty values
        out[str(key)] = [v if v is not None else "" for v in values]
    return out


def node_to_json_dict(node: Node) -> dict:
    return {
        "type": node.type,
        "name": node.name,
        "properties": {k: list(v) for k, v in node.properties.items()},
    }


def node_from_json_dict(d: Mapping[str, Any]) -> Node:
    if not isinstance(d, Mapping):
        raise ValueError("node_from_json_dict expects a mapping")
    return Node(
        type=_text_from_json(d, "type"),
        name=_text_from_json(d, "name"),
        properties=_properties_from_json(d.get("properties")),
    )


def document_to_json_list(doc: Document) -> list:
    return [node_to_json_dict(n) for n in doc]


def document_from_json_list(data: Any) -> Document:
    if not isinstance(data, list):
        raise WPPError(ErrorKind.NOT_WPP)
    return [node_from_json_dict(d) for d in data]


def extended_to_json_dict(xdoc: ExtendedDocument) -> dict:
    return {
        "wpp": document_to_json_list(xdoc.wpp),
        "appendix": xdoc.appendix,
    }


def extended_from_json_dict(data: Any) -> ExtendedDocument:
    if not isinstance(data, Mapping) or data.get("wpp") is None:
        raise WPPError(ErrorKind.NOT_WPP_EXTENDED)
    appendix: Optional[str] = data.get("appendix")
    return ExtendedDocument(
        wpp=document_from_json_list(data["wpp"]),
        appendix=appendix if appendix else None,
    )


# -----------------------------
# Coercion of caller-supplied values. Every helper returns a fresh copy,
# so operations built on them never share structure with their inputs.

def to_node(value: Any) -> Node:
    if isinstance(value, Node):
        return value.copy()
    if isinstance(value, Mapping):
        return node_from_json_dict(value)
    raise WPPError(ErrorKind.NOT_WPP)


def to_document(value: Any) -> Document:
    if not isinstance(value, (list, tuple)):
        raise WPPError(ErrorKind.NOT_WPP)
    return [to_node(v) for v in value]


def to_extended(value: Any) -> ExtendedDocument:
    if isinstance(value, ExtendedDocument):
        wpp, appendix = value.wpp, value.appendix
    elif isinstance(value, Mapping):
        wpp, appendix = value.get("wpp"), value.get("appendix")
    else:
        raise WPPError(ErrorKind.NOT_WPP_EXTENDED)
    if wpp is None:
        raise WPPError(ErrorKind.NOT_WPP_EXTENDED)
    return ExtendedDocument(wpp=to_document(wpp), appendix=appendix)
