"""
Tests for the directive comment grammar engine.

This module tests:
- Marker recognition anywhere in a line, case-insensitively
- Optional dotted command and parenthesized argument capture
- Fatal grammar errors with their positions
"""

from typing import NamedTuple

import pytest

from cttt_parser.exceptions import GrammarError
from cttt_parser.parsing.grammar import DirectiveGrammar, RawMatch, recognize


class GrammarTestCase(NamedTuple):
    """Test case for single-line recognition."""

    name: str
    source: str
    command: str | None
    raw_args: str | None
    marker_col: int = 3


VALID_LINES = [
    GrammarTestCase("command_with_args", "// @cttt.foo(1,2)", "foo", "1,2"),
    GrammarTestCase("bare_marker", "// @cttt", None, None),
    GrammarTestCase("empty_args", "// @cttt.noop()", "noop", ""),
    GrammarTestCase("whitespace_args", "// @cttt.change( )", "change", " "),
    GrammarTestCase("command_without_args", "// @cttt.named", "named", None),
    GrammarTestCase("kebab_command", "// @cttt.named-bar-baz()", "named-bar-baz", ""),
    GrammarTestCase("space_before_args", "// @cttt.foo (a, b)", "foo", "a, b"),
    GrammarTestCase("nested_parens", "// @cttt.foo((a), b)", "foo", "(a), b"),
    GrammarTestCase("upper_case_marker", "// @CTTT.named(X)", "named", "X"),
    GrammarTestCase("mixed_case_marker", "# @CtTt.Change(y)", "Change", "y", 2),
    GrammarTestCase("marker_at_line_start", "@cttt.foo()", "foo", "", 0),
    GrammarTestCase("block_delimiters", "/* @cttt.named(123) */", "named", "123"),
    GrammarTestCase("text_after_command", "// @cttt.foo bar", "foo", None),
    GrammarTestCase("args_ignored_without_command", "// @cttt(foo)", None, None),
    GrammarTestCase("trailing_text_without_command", "// @cttt see docs", None, None),
    GrammarTestCase("unicode_command", "// @cttt.café(x, y)", "café", "x, y"),
    GrammarTestCase("digits_and_underscore", "// @cttt.step_2(a)", "step_2", "a"),
    GrammarTestCase("stray_paren_after_group", "// @cttt.foo(a))", "foo", "a"),
    GrammarTestCase("ml_comment_close", "(* @cttt.foo(a) *)", "foo", "a"),
]


class TestRecognizeLine:
    """Tests for recognizing a single directive line."""

    @pytest.mark.parametrize("case", VALID_LINES, ids=lambda case: case.name)
    def test_valid_line(self, case: GrammarTestCase):
        """Test each valid line yields one match with the expected parts."""
        matches = recognize(case.source)

        assert matches == [
            RawMatch(
                line=1,
                text=case.source,
                marker_col=case.marker_col,
                command=case.command,
                raw_args=case.raw_args,
            )
        ]

    def test_command_keeps_original_case(self):
        """Test the command identifier is not case-folded."""
        matches = recognize("// @cttt.CHANGE(./foo.txt,abc)")
        assert matches[0].command == "CHANGE"

    def test_first_marker_on_line_wins(self):
        """Test a line with two markers produces a single match."""
        matches = recognize("// @cttt.first(a) @cttt.second(b)")

        assert len(matches) == 1
        assert matches[0].command == "first"
        assert matches[0].raw_args == "a"

    def test_marker_inside_word(self):
        """Test the marker is recognized regardless of surrounding text."""
        matches = recognize("email@cttt.com")

        assert len(matches) == 1
        assert matches[0].command == "com"
        assert matches[0].marker_col == 5

    def test_carriage_return_kept_in_text(self):
        """Test only "\\n" separates lines."""
        matches = recognize("// @cttt.foo(1)\r\n// @cttt")

        assert [m.line for m in matches] == [1, 2]
        assert matches[0].text == "// @cttt.foo(1)\r"
        assert matches[0].raw_args == "1"


class TestRecognizeDocument:
    """Tests for recognition across multiple lines."""

    def test_no_marker(self):
        """Test text without the marker yields no matches."""
        assert recognize("x = 1;\n// just a comment\n/* cttt */") == []

    def test_empty_source(self):
        """Test empty input yields no matches."""
        assert recognize("") == []

    def test_lines_are_independent(self, block_comment_source):
        """Test markers in one block comment are matched per physical line."""
        matches = recognize(block_comment_source)

        assert [(m.line, m.command) for m in matches] == [(3, "named"), (7, "noop")]
        assert all(m.marker_col == 15 for m in matches)

    def test_source_order(self, mixed_source):
        """Test matches follow source order with correct line numbers."""
        matches = recognize(mixed_source)

        assert [(m.line, m.command) for m in matches] == [
            (1, "named"),
            (2, "named"),
            (4, "change"),
            (5, None),
            (6, "change"),
        ]

    def test_deterministic(self, mixed_source):
        """Test identical input yields identical output."""
        grammar = DirectiveGrammar()
        assert grammar.recognize(mixed_source) == grammar.recognize(mixed_source)


class TestGrammarErrors:
    """Tests for fatal grammar errors."""

    def test_unclosed_argument_list(self):
        """Test an unclosed '(' fails with its position."""
        with pytest.raises(GrammarError, match="Unbalanced parentheses") as exc_info:
            recognize("// @cttt.foo(a")

        assert exc_info.value.line == 1
        assert exc_info.value.col == 12

    def test_unbalanced_nested_parens(self):
        """Test nested groups must be closed as well."""
        with pytest.raises(GrammarError, match="Unbalanced parentheses"):
            recognize("// @cttt.foo((a)")

    def test_missing_command_after_dot(self):
        """Test a dot after the marker requires a command name."""
        with pytest.raises(GrammarError, match="Expected command name") as exc_info:
            recognize("// @cttt.")

        assert exc_info.value.col == 9

    @pytest.mark.parametrize(
        "source,col",
        [
            ("// @cttt.foo.bar(x, y)", 12),
            ("// @cttt.foo/bar", 12),
            ("// @cttt.named*/", 14),
            ("// @cttt.x,y(1)", 10),
        ],
    )
    def test_unexpected_character_after_command(self, source, col):
        """Test a command is never cut short at a foreign character."""
        with pytest.raises(GrammarError, match="Unexpected character") as exc_info:
            recognize(source)

        assert exc_info.value.line == 1
        assert exc_info.value.col == col

    def test_argument_list_does_not_span_lines(self):
        """Test a directive body cannot continue on the next line."""
        with pytest.raises(GrammarError) as exc_info:
            recognize("// @cttt.foo(a,\n// b)")

        assert exc_info.value.line == 1

    def test_error_aborts_whole_call(self):
        """Test a malformed directive after valid ones fails the whole scan."""
        source = "// @cttt.named(1)\n// @cttt.named(2)\n// @cttt.broken(3"

        with pytest.raises(GrammarError) as exc_info:
            recognize(source)

        assert exc_info.value.line == 3

    def test_error_message_points_at_column(self):
        """Test the message shows the offending line and a caret."""
        with pytest.raises(GrammarError) as exc_info:
            recognize("// @cttt.foo(a")

        message = str(exc_info.value)
        assert "at line 1, column 12" in message
        assert "  | // @cttt.foo(a" in message
        assert "  | " + " " * 12 + "^" in message
