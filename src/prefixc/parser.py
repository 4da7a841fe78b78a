"""
Recursive descent parser for the prefix-notation source language.

Converts a token list into a source AST. Grammar:

    program    := expression*
    expression := NUMBER | STRING | "(" NAME expression* ")"
"""

from typing import List, Optional
from .tokens import Token, TokenType, SourceSpan, SourceLocation
from .ast import (
    Expression, Program, CallExpression, NumberLiteral, StringLiteral,
)
from .errors import (
    error_unexpected_token,
    error_unexpected_eof,
    error_missing_call_name,
)


class Parser:
    """
    Recursive descent parser with a single token of lookahead.

    Usage:
        parser = Parser(tokens)
        program = parser.parse_program()

    There is no error recovery: the first malformed construct raises
    ParseError.
    """

    def __init__(self, tokens: List[Token], filename: Optional[str] = None,
                 source: Optional[str] = None):
        self.tokens = tokens
        self.filename = filename
        self.source = source  # Original source code, for error excerpts
        self.pos = 0

    # =========================================================================
    # Token Navigation
    # =========================================================================

    def _current(self) -> Optional[Token]:
        """Get current token, or None past the end."""
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._current()
        if not self._is_at_end():
            self.pos += 1
        return token

    def _source_line(self, span: SourceSpan) -> Optional[str]:
        if self.source is None:
            return None
        lines = self.source.splitlines()
        if 1 <= span.start.line <= len(lines):
            return lines[span.start.line - 1]
        return None

    def _end_span(self) -> SourceSpan:
        """Zero-width span just past the last token."""
        if self.tokens:
            end = self.tokens[-1].span.end
        else:
            end = SourceLocation(1, 1, 0, self.filename)
        return SourceSpan(end, end)

    def _error(self, expected: str) -> None:
        """Raise a parser error at the current token."""
        token = self._current()
        if token is None:
            span = self._end_span()
            raise error_unexpected_eof(expected, span, self._source_line(span))
        raise error_unexpected_token(
            expected, token.describe(), token.span, self._source_line(token.span)
        )

    def _span_from(self, start: Token) -> SourceSpan:
        """Create a span from start token to the last consumed token."""
        end_token = self.tokens[max(0, self.pos - 1)]
        return SourceSpan(start.span.start, end_token.span.end)

    # =========================================================================
    # Expressions
    # =========================================================================

    def parse_expression(self) -> Expression:
        """Parse a single literal or call."""
        token = self._current()
        if token is None:
            self._error("expression")

        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(token.value, span=token.span)

        if token.type == TokenType.STRING:
            self._advance()
            return StringLiteral(token.value, span=token.span)

        if token.is_open_paren:
            return self._parse_call()

        self._error("expression")

    def _parse_call(self) -> CallExpression:
        """Parse ``( NAME expression* )``."""
        start = self._advance()  # consume '('

        name_token = self._current()
        if name_token is None:
            self._error("function name")
        if name_token.type != TokenType.NAME:
            raise error_missing_call_name(
                name_token.describe(), name_token.span,
                self._source_line(name_token.span)
            )
        self._advance()

        params = []
        while True:
            token = self._current()
            if token is None:
                self._error("')'")
            if token.is_close_paren:
                break
            params.append(self.parse_expression())

        self._advance()  # consume ')'
        return CallExpression(
            name_token.value,
            tuple(params),
            span=self._span_from(start),
        )

    # =========================================================================
    # Program
    # =========================================================================

    def parse_program(self) -> Program:
        """Parse expressions until the tokens run out."""
        body = []
        while not self._is_at_end():
            body.append(self.parse_expression())

        span = None
        if self.tokens:
            span = SourceSpan(self.tokens[0].span.start, self.tokens[-1].span.end)
        return Program(tuple(body), span=span)


def parse(tokens: List[Token], filename: Optional[str] = None,
          source: Optional[str] = None) -> Program:
    """
    Convenience function to parse tokens into a program.

    Args:
        tokens: List of tokens from the lexer
        filename: Optional filename for error messages
        source: Optional original source code for error excerpts

    Returns:
        Parsed Program AST

    Raises:
        ParseError: If parsing fails
    """
    parser = Parser(tokens, filename, source)
    return parser.parse_program()
