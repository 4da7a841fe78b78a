"""
Unit tests for the prefixc lexer.
"""

import pytest
from prefixc import tokenize, Lexer, TokenType, LexError


def kinds_and_values(tokens):
    return [(t.type, t.value) for t in tokens]


class TestLexerBasics:
    """Test basic lexer functionality."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace of every kind is skipped."""
        assert tokenize("  \t\n\r  ") == []

    def test_nested_call(self):
        """The canonical example tokenizes as expected."""
        tokens = tokenize("(add 2 (subtract 4 2))")
        assert kinds_and_values(tokens) == [
            (TokenType.PAREN, "("),
            (TokenType.NAME, "add"),
            (TokenType.NUMBER, "2"),
            (TokenType.PAREN, "("),
            (TokenType.NAME, "subtract"),
            (TokenType.NUMBER, "4"),
            (TokenType.NUMBER, "2"),
            (TokenType.PAREN, ")"),
            (TokenType.PAREN, ")"),
        ]

    def test_parens_need_no_whitespace(self):
        """Parentheses delimit tokens on their own."""
        tokens = tokenize("(f(g))")
        assert [t.value for t in tokens] == ["(", "f", "(", "g", ")", ")"]

    def test_lexer_is_iterable(self):
        """Iterating a Lexer yields the same tokens as tokenize()."""
        assert list(Lexer("(a 1)")) == tokenize("(a 1)")


class TestNames:
    """Test name handling."""

    def test_mixed_case_name(self):
        """Names accept upper and lower case letters."""
        tokens = tokenize("AddThem")
        assert kinds_and_values(tokens) == [(TokenType.NAME, "AddThem")]

    def test_digit_ends_name(self):
        """A digit is not part of a name."""
        tokens = tokenize("abc1")
        assert kinds_and_values(tokens) == [
            (TokenType.NAME, "abc"),
            (TokenType.NUMBER, "1"),
        ]

    def test_underscore_is_rejected(self):
        """Only ASCII letters make up names."""
        with pytest.raises(LexError):
            tokenize("foo_bar")


class TestNumbers:
    """Test numeric literal handling."""

    def test_single_digit(self):
        tokens = tokenize("7")
        assert kinds_and_values(tokens) == [(TokenType.NUMBER, "7")]

    def test_multi_digit_splits_by_default(self):
        """Each digit is its own NUMBER token."""
        tokens = tokenize("42")
        assert kinds_and_values(tokens) == [
            (TokenType.NUMBER, "4"),
            (TokenType.NUMBER, "2"),
        ]

    def test_multi_digit_option(self):
        """Digit runs are kept together when asked."""
        tokens = tokenize("(add 42 7)", multi_digit_numbers=True)
        assert kinds_and_values(tokens)[2:4] == [
            (TokenType.NUMBER, "42"),
            (TokenType.NUMBER, "7"),
        ]


class TestStringLiterals:
    """Test string literal handling."""

    def test_simple_string(self):
        """Quotes are stripped from the value but kept in the lexeme."""
        tokens = tokenize('"hello world"')
        assert tokens[0].type == TokenType.STRING
        assert tokens[0].value == "hello world"
        assert tokens[0].lexeme == '"hello world"'

    def test_empty_string(self):
        tokens = tokenize('""')
        assert kinds_and_values(tokens) == [(TokenType.STRING, "")]

    def test_string_keeps_any_characters(self):
        """Characters that are errors elsewhere are fine inside strings."""
        tokens = tokenize('"#$ (x) 12"')
        assert tokens[0].value == "#$ (x) 12"

    def test_unterminated_string(self):
        """A string without a closing quote is an error."""
        with pytest.raises(LexError) as exc_info:
            tokenize('(concat "abc')
        assert exc_info.value.code == "E002"
        assert exc_info.value.diagnostic.span.start.column == 9


class TestErrors:
    """Test lexer error reporting."""

    def test_unexpected_character(self):
        """Unknown characters are reported with their position."""
        with pytest.raises(LexError) as exc_info:
            tokenize("(add 2 #)")
        error = exc_info.value
        assert error.code == "E001"
        assert "'#'" in error.diagnostic.message
        assert error.diagnostic.span.start.line == 1
        assert error.diagnostic.span.start.column == 8
        assert "1:8" in str(error)

    def test_error_on_later_line(self):
        """Line numbers advance across newlines."""
        with pytest.raises(LexError) as exc_info:
            tokenize("(add 1 2)\n(sub 3 -)")
        start = exc_info.value.diagnostic.span.start
        assert (start.line, start.column) == (2, 8)

    def test_error_includes_filename(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("%", filename="prog.lisp")
        assert "prog.lisp:1:1" in str(exc_info.value)


class TestPositions:
    """Test position tracking."""

    def test_columns(self):
        tokens = tokenize("(add 12)")
        assert [t.span.start.column for t in tokens] == [1, 2, 6, 7, 8]

    def test_lines(self):
        tokens = tokenize("(a)\n(b)")
        assert tokens[3].span.start.line == 2
        assert tokens[3].span.start.column == 1
