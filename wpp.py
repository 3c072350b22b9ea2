# Public W++ API

from wpp_conversion import (
    document_from_json_list,
    document_to_json_list,
    extended_from_json_dict,
    extended_to_json_dict,
    node_from_json_dict,
    node_to_json_dict,
)
from wpp_merge import get_merged, get_merged_extended, trim
from wpp_parser import break_attribute, parse, parse_extended, remove_extra_spaces
from wpp_serializer import StringifyMode, stringify, stringify_extended, validate
from wpp_struct import Attribute, Document, ErrorKind, ExtendedDocument, Node, WPPError

__all__ = [
    "Attribute",
    "Document",
    "ErrorKind",
    "ExtendedDocument",
    "Node",
    "StringifyMode",
    "WPPError",
    "break_attribute",
    "document_from_json_list",
    "document_to_json_list",
    "extended_from_json_dict",
    "extended_to_json_dict",
    "get_merged",
    "get_merged_extended",
    "node_from_json_dict",
    "node_to_json_dict",
    "parse",
    "parse_extended",
    "remove_extra_spaces",
    "stringify",
    "stringify_extended",
    "trim",
    "validate",
]
