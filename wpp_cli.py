"""CLI tool to parse/merge/convert W++ files."""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from wpp_conversion import document_to_json_list, extended_to_json_dict
from wpp_merge import get_merged, get_merged_extended, trim
from wpp_parser import parse, parse_extended
from wpp_serializer import StringifyMode, stringify, stringify_extended
from wpp_struct import ExtendedDocument, WPPError

logger = logging.getLogger(__name__)


def _read(path: str, extended: bool):
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    return parse_extended(content) if extended else parse(content)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse W++ and convert to JSON or canonical W++.")
    parser.add_argument("path", help="Path to a text file containing W++ groups")
    parser.add_argument(
        "--merge",
        dest="merge_path",
        default=None,
        help="Merge groups from this file into PATH (PATH takes priority)",
    )
    parser.add_argument(
        "--trim",
        action="store_true",
        help="Drop groups without a name",
    )
    parser.add_argument(
        "--json",
        dest="emit_json",
        action="store_true",
        help="Emit JSON (<name>.json), the default output",
    )
    parser.add_argument(
        "--stringify",
        dest="emit_text",
        action="store_true",
        help="Print canonical W++ to stdout",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in StringifyMode],
        default=StringifyMode.NORMAL.value,
        help="Layout used by --stringify (default: normal)",
    )

    parser.add_argument(
        "--extended",
        dest="extended",
        action="store_true",
        default=True,
        help="Keep free text outside groups as an appendix (default: on).",
    )
    parser.add_argument(
        "--no-extended",
        dest="extended",
        action="store_false",
        help="Parse the whole file as W++ groups and drop the appendix.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = args.path
    try:
        doc = _read(path, args.extended)
        if args.merge_path:
            other = _read(args.merge_path, args.extended)
            doc = get_merged_extended(doc, other) if args.extended else get_merged(doc, other)
            logger.info("merged %s into %s", args.merge_path, path)
        if args.trim:
            if isinstance(doc, ExtendedDocument):
                doc = ExtendedDocument(wpp=trim(doc.wpp), appendix=doc.appendix)
            else:
                doc = trim(doc)
    except WPPError as e:
        raise SystemExit(f"Error parsing W++ file: {e}")

    # if no output flags are provided, emit json by default
    emit_json = args.emit_json or not args.emit_text

    if emit_json:
        if isinstance(doc, ExtendedDocument):
            as_json = extended_to_json_dict(doc)
        else:
            as_json = document_to_json_list(doc)
        json_path = os.path.splitext(path)[0] + ".json"
        with open(json_path, "w", encoding="utf-8") as fw:
            json.dump(as_json, fw, indent=4)
        logger.info("wrote %s", json_path)

    if args.emit_text:
        if isinstance(doc, ExtendedDocument):
            text = stringify_extended(doc, args.mode)
        else:
            text = stringify(doc, args.mode)
        sys.stdout.write(text + "\n")


if __name__ == "__main__":
    main()
