"""Tests for documents that mix W++ groups with free text."""
from __future__ import annotations

import pytest

from wpp_merge import get_merged_extended
from wpp_parser import parse_extended
from wpp_serializer import stringify_extended
from wpp_struct import ErrorKind, ExtendedDocument, Node, WPPError


class TestParseExtended:
    """Splitting group spans from the appendix."""

    def test_group_and_notes(self) -> None:
        xdoc = parse_extended('[A("n"){}]\n\nNotes')

        assert xdoc.wpp == [Node(type="A", name="n", properties={})]
        assert xdoc.appendix == "\nNotes"

    def test_prose_around_groups(self) -> None:
        text = 'Intro line.\n[A("n"){ k("v") }]\nOutro line.'

        xdoc = parse_extended(text)

        assert xdoc.wpp == [Node(type="A", name="n", properties={"k": ["v"]})]
        assert xdoc.appendix == "Intro line.\n\nOutro line."

    def test_blank_line_runs_collapse(self) -> None:
        xdoc = parse_extended('[A("n"){}]\n   \n\t\n\nNotes\n\n\nMore')

        assert xdoc.appendix == "\nNotes\n\nMore"

    def test_only_groups_gives_no_appendix(self) -> None:
        xdoc = parse_extended('[A("a"){}]\n\n  [B("b"){}]\n')

        assert [n.name for n in xdoc.wpp] == ["a", "b"]
        assert xdoc.appendix is None

    def test_only_text_gives_empty_document(self) -> None:
        xdoc = parse_extended("Just some words.")

        assert xdoc.wpp == []
        assert xdoc.appendix == "Just some words."

    def test_empty_text(self) -> None:
        assert parse_extended("") == ExtendedDocument(wpp=[], appendix=None)

    def test_bracketed_prose_is_treated_as_a_group(self) -> None:
        with pytest.raises(WPPError) as exc:
            parse_extended("See [the notes] above.")

        assert exc.value.kind is ErrorKind.NO_GROUPS

    def test_bad_group_fails(self) -> None:
        with pytest.raises(WPPError) as exc:
            parse_extended("Intro\n[Broken{k(\"v\")}]")

        assert exc.value.kind is ErrorKind.BAD_ATTRIBUTE


class TestStringifyExtended:
    """Groups first, then the appendix verbatim."""

    def test_groups_then_appendix(self) -> None:
        xdoc = ExtendedDocument(wpp=[Node(type="A", name="n")], appendix="\nNotes")

        assert stringify_extended(xdoc) == '[A("n"){\n}]\nNotes'

    def test_nameless_nodes_are_dropped(self) -> None:
        xdoc = ExtendedDocument(
            wpp=[Node(type="A", name=""), Node(type="B", name="b")],
            appendix=None,
        )

        assert stringify_extended(xdoc, "line") == '[B("b"){}]'

    def test_appendix_only(self) -> None:
        xdoc = ExtendedDocument(wpp=[Node(type="A", name="")], appendix="Notes")

        assert stringify_extended(xdoc) == "Notes"

    def test_mapping_input(self) -> None:
        out = stringify_extended({"wpp": [{"type": "A", "name": "n"}], "appendix": "x"})

        assert out == '[A("n"){\n}]x'

    def test_round_trip(self) -> None:
        text = '[A("n"){k("v")}]\nSome notes.'

        assert stringify_extended(parse_extended(text)) == '[A("n"){\nk("v")\n}]\nSome notes.'

    @pytest.mark.parametrize("value", [None, {}, {"appendix": "x"}, [Node(type="A", name="n")]])
    def test_not_extended(self, value) -> None:
        with pytest.raises(WPPError) as exc:
            stringify_extended(value)

        assert exc.value.kind is ErrorKind.NOT_WPP_EXTENDED

    def test_unknown_mode_rejected_without_named_nodes(self) -> None:
        xdoc = ExtendedDocument(wpp=[Node(type="A", name="")], appendix="Notes")

        with pytest.raises(ValueError):
            stringify_extended(xdoc, "pretty")


class TestGetMergedExtended:
    """Merging groups and joining appendices."""

    def test_merges_groups_and_appendices(self) -> None:
        first = ExtendedDocument(wpp=[Node(type="A", name="X", properties={"k": ["1"]})], appendix="one")
        second = ExtendedDocument(wpp=[Node(type="A", name="X", properties={"k": ["2"]})], appendix="two")

        merged = get_merged_extended(first, second)

        assert merged.wpp == [Node(type="A", name="X", properties={"k": ["1", "2"]})]
        assert merged.appendix == "one\ntwo"

    @pytest.mark.parametrize(
        "first, second, expected",
        [
            ("one", None, "one"),
            (None, "two", "two"),
            ("", "two", "two"),
            (None, None, None),
            ("", "", None),
        ],
    )
    def test_appendix_joining(self, first, second, expected) -> None:
        merged = get_merged_extended(
            ExtendedDocument(wpp=[], appendix=first),
            ExtendedDocument(wpp=[], appendix=second),
        )

        assert merged.wpp == []
        assert merged.appendix == expected

    def test_inputs_are_not_modified(self) -> None:
        first = ExtendedDocument(wpp=[Node(type="A", name="X", properties={"k": ["1"]})])
        second = ExtendedDocument(wpp=[Node(type="A", name="X", properties={"k": ["2"]})])

        get_merged_extended(first, second)

        assert first.wpp[0].properties == {"k": ["1"]}

    def test_missing_wpp(self) -> None:
        with pytest.raises(WPPError) as exc:
            get_merged_extended(ExtendedDocument(), {"appendix": "x"})

        assert exc.value.kind is ErrorKind.NOT_WPP_EXTENDED
