"""Test whitespace, newlines, and line comments."""

from loxscan.scanner import scan
from loxscan.tokens import TokenType

from .conftest import assert_types


class TestWhitespace:
    def test_spaces_tabs_cr_are_skipped(self, lex):
        tokens = lex(" \t\r a \t b\r")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.IDENTIFIER])

    def test_only_whitespace(self, lex):
        assert lex("  \t\r\n  ") == []

    def test_crlf_counts_one_line(self):
        tokens = scan("a\r\nb").tokens
        assert tokens[0].line == 1
        assert tokens[1].line == 2


class TestNewlines:
    def test_line_increments(self, lex):
        tokens = lex("a\nb\n\nc")
        assert [t.line for t in tokens] == [1, 2, 4]

    def test_eof_line_is_final_line(self):
        tokens = scan("a\n\n").tokens
        assert tokens[-1].type == TokenType.EOF
        assert tokens[-1].line == 3

    def test_column_resets_after_newline(self, lex):
        tokens = lex("abc\n  d")
        assert tokens[1].span.start.column == 3
        assert tokens[1].span.start.offset == 6


class TestComments:
    def test_comment_produces_no_token(self, lex):
        assert lex("// nothing here") == []

    def test_comment_then_code_on_next_line(self, lex):
        tokens = lex("// note\nprint")
        assert_types(tokens, [TokenType.PRINT])
        assert tokens[0].line == 2

    def test_code_before_comment(self, lex):
        tokens = lex("a // b c d")
        assert_types(tokens, [TokenType.IDENTIFIER])

    def test_comment_swallows_operators_and_quotes(self, lex):
        assert lex('// "unterminated @ # $ <=') == []

    def test_slash_is_division(self, lex):
        tokens = lex("a / b")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.SLASH, TokenType.IDENTIFIER])

    def test_comment_at_end_of_input_without_newline(self):
        result = scan("x //")
        assert [t.type for t in result.tokens] == [TokenType.IDENTIFIER, TokenType.EOF]
        assert result.ok

    def test_comment_keeps_line_count(self):
        tokens = scan("// one\n// two\nx").tokens
        assert tokens[0].line == 3
