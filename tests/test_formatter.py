"""Tests for the formatting entry points."""

import pytest

from docfmt.core.formatter import (
    DocumentationCommentFormatter,
    MalformedInputError,
    parse_fragment,
)
from docfmt.formatting.ir import RunKind


class TestFormatToString:
    """Tests for plain-text formatting."""

    def test_none_input(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string(None) is None

    def test_empty_input(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string("") == ""

    def test_plain_text(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string("Gets the value.") == "Gets the value."

    def test_empty_paragraph_and_edges_trimmed(self, formatter: DocumentationCommentFormatter):
        """Test an empty <para> vanishes and outer whitespace is dropped."""
        text = formatter.format_to_string("  Summary <para>  </para> text.  ")

        assert text == "Summary text."

    def test_paragraphs_separated_by_blank_line(self, formatter: DocumentationCommentFormatter):
        text = formatter.format_to_string("A<para>B</para>C")

        assert text == "A\r\n\r\nB\r\n\r\nC"

    def test_paragraph_at_start_and_end(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string("<para>Only</para>") == "Only"
        assert formatter.format_to_string("Text<para></para>") == "Text"
        assert formatter.format_to_string("<para></para>Text") == "Text"

    def test_adjacent_paragraphs_one_separator(self, formatter: DocumentationCommentFormatter):
        text = formatter.format_to_string(
            "<para>First</para>\n  <para> </para>\n  <para>Second</para>"
        )

        assert text == "First\r\n\r\nSecond"

    def test_nested_paragraphs(self, formatter: DocumentationCommentFormatter):
        text = formatter.format_to_string("A<para><para>B</para></para>C")

        assert text == "A\r\n\r\nB\r\n\r\nC"
        assert "\r\n\r\n\r\n" not in text

    def test_multiline_comment(self, formatter: DocumentationCommentFormatter):
        raw = """
            <summary>
            Creates a new widget
            with the given size.
            </summary>
            <remarks>Widgets are cheap.</remarks>
        """

        text = formatter.format_to_string(raw)

        assert text == "Creates a new widget with the given size. Widgets are cheap."

    def test_unknown_elements_are_transparent(self, formatter: DocumentationCommentFormatter):
        text = formatter.format_to_string("Use <c>null</c> or <b>empty</b> here.")

        assert text == "Use null or empty here."

    def test_entities_decoded(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string("a &lt; b &amp;&amp; c") == "a < b && c"

    def test_comments_skipped_tail_kept(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string("a <!-- note --> b") == "a b"

    def test_reference_fallback_strips_prefix(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string('<see cref="T:My.Type"/>') == "My.Type"

    def test_unresolved_paramref(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string('<paramref name="value"/>') == "value"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ('<seealso cref="N:My.Ns"/>', "My.Ns"),
            ('<typeparamref name="T"/>', "T"),
            ('<see cref="Plain"/>', "Plain"),
            ('<see cref="T:"/>', ""),
        ],
    )
    def test_reference_tags(self, formatter: DocumentationCommentFormatter, raw, expected):
        assert formatter.format_to_string(raw) == expected

    def test_reference_spacing(self, formatter: DocumentationCommentFormatter):
        text = formatter.format_to_string('See <see cref="T:A.B"/> for details.')

        assert text == "See A.B for details."

    def test_reference_without_attribute(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string("a <see/> b") == "a b"
        assert formatter.format_to_string('<paramref cref="x"/>') == ""

    def test_reference_children_ignored(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_string('<see cref="T:A">ignored</see>') == "A"

    def test_normalized_text_is_fixed_point(self, formatter: DocumentationCommentFormatter):
        once = formatter.format_to_string("One two, three.")
        twice = formatter.format_to_string(once)

        assert once == "One two, three."
        assert twice == once

    def test_custom_line_break(self):
        formatter = DocumentationCommentFormatter(line_break="\n")

        assert formatter.format_to_string("A<para>B</para>") == "A\n\nB"


class TestFormatToRuns:
    """Tests for display-run formatting."""

    def test_none_input(self, formatter: DocumentationCommentFormatter):
        assert formatter.format_to_runs(None, None, 0) is None

    def test_run_kinds(self, formatter: DocumentationCommentFormatter):
        runs = formatter.format_to_runs("Hello <para>World</para>", None, 0)

        assert [r.kind for r in runs] == [
            RunKind.TEXT,
            RunKind.LINE_BREAK,
            RunKind.LINE_BREAK,
            RunKind.TEXT,
        ]
        assert [r.text for r in runs] == ["Hello", "\r\n", "\r\n", "World"]

    @pytest.mark.parametrize(
        "raw",
        [
            "  padded  ",
            "<para> a </para>",
            " a <para></para><para> b </para> ",
            '<see cref="T:X"/> tail  ',
            "\n\n",
        ],
    )
    def test_never_starts_or_ends_with_whitespace(
        self, formatter: DocumentationCommentFormatter, raw
    ):
        runs = formatter.format_to_runs(raw, None, 0)

        if runs:
            assert not runs[0].kind.is_whitespace
            assert not runs[-1].kind.is_whitespace

    def test_no_unresolved_without_model(self, resolving_formatter, fake_resolver):
        """Test a missing semantic model means literal references."""
        runs = resolving_formatter.format_to_runs('<see cref="T:My.Type"/>', None, 0)

        assert [r.text for r in runs] == ["My.Type"]
        assert fake_resolver.calls == []


class TestMalformedInput:
    """Tests for parse failures."""

    @pytest.mark.parametrize(
        "raw",
        [
            "<para>unclosed",
            "stray </para>",
            "a < b",
            '<see cref="unterminated/>',
        ],
    )
    def test_malformed_raises(self, formatter: DocumentationCommentFormatter, raw):
        with pytest.raises(MalformedInputError):
            formatter.format_to_string(raw)

        with pytest.raises(MalformedInputError):
            formatter.format_to_runs(raw, None, 0)

    def test_parse_fragment_wraps_multiple_roots(self):
        root = parse_fragment("<summary>a</summary><remarks>b</remarks>")

        assert [child.tag for child in root] == ["summary", "remarks"]
