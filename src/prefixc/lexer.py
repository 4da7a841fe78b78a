"""
Lexer for the prefix-notation source language.

Converts source text into a flat list of tokens for the parser. At each
position the rules are tried in a fixed order:

1. ``(`` and ``)`` become PAREN tokens
2. whitespace is skipped
3. a digit becomes a NUMBER token holding exactly that one digit
4. ``"`` starts a string running up to the next ``"``
5. a run of ASCII letters becomes a NAME token
6. anything else is an error

Rule 3 means ``42`` lexes as two NUMBER tokens. Pass
``multi_digit_numbers=True`` to accumulate digit runs instead.
"""

import string
from typing import List, Optional, Iterator
from .tokens import Token, TokenType, SourceLocation, SourceSpan
from .errors import (
    error_unexpected_character,
    error_unterminated_string,
)

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)


class Lexer:
    """
    Tokenizer for the prefix-notation language.

    Usage:
        lexer = Lexer(source_code)
        tokens = lexer.tokenize()

    Or for streaming:
        lexer = Lexer(source_code)
        for token in lexer:
            process(token)
    """

    def __init__(self, source: str, filename: Optional[str] = None,
                 multi_digit_numbers: bool = False):
        self.source = source
        self.filename = filename
        self.multi_digit_numbers = multi_digit_numbers
        self.pos = 0            # Current position in source
        self.line = 1           # Current line (1-indexed)
        self.column = 1         # Current column (1-indexed)
        self._lines: Optional[List[str]] = None  # Cached line list

    @property
    def lines(self) -> List[str]:
        """Lazy-load line list for error reporting."""
        if self._lines is None:
            self._lines = self.source.splitlines()
        return self._lines

    def get_source_line(self, line_num: int) -> Optional[str]:
        """Get a specific line of source (1-indexed)."""
        if 1 <= line_num <= len(self.lines):
            return self.lines[line_num - 1]
        return None

    def _location(self) -> SourceLocation:
        """Get current source location."""
        return SourceLocation(self.line, self.column, self.pos, self.filename)

    def _span(self, start: SourceLocation) -> SourceSpan:
        """Create a span from start to current position."""
        return SourceSpan(start, self._location())

    def _peek(self) -> str:
        """Look at the current character without consuming it."""
        if self.pos >= len(self.source):
            return '\0'
        return self.source[self.pos]

    def _advance(self) -> str:
        """Consume and return current character."""
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _make_token(self, token_type: TokenType, value: str,
                    start: SourceLocation) -> Token:
        lexeme = self.source[start.offset:self.pos]
        return Token(token_type, value, lexeme, self._span(start))

    def _scan_string(self) -> Token:
        """Scan a double-quoted string literal."""
        start = self._location()
        self._advance()  # consume opening quote

        chars = []
        while not self._is_at_end() and self._peek() != '"':
            chars.append(self._advance())

        if self._is_at_end():
            raise error_unterminated_string(
                self._span(start),
                self.get_source_line(start.line)
            )

        self._advance()  # consume closing quote
        return self._make_token(TokenType.STRING, ''.join(chars), start)

    def _scan_number(self) -> Token:
        start = self._location()
        self._advance()
        if self.multi_digit_numbers:
            while self._peek() in DIGITS:
                self._advance()
        lexeme = self.source[start.offset:self.pos]
        return self._make_token(TokenType.NUMBER, lexeme, start)

    def _scan_name(self) -> Token:
        start = self._location()
        while self._peek() in LETTERS:
            self._advance()
        lexeme = self.source[start.offset:self.pos]
        return self._make_token(TokenType.NAME, lexeme, start)

    def _scan_token(self) -> Optional[Token]:
        """Scan the next token, or return None at end of input."""
        while not self._is_at_end() and self._peek().isspace():
            self._advance()

        if self._is_at_end():
            return None

        ch = self._peek()

        if ch in '()':
            start = self._location()
            self._advance()
            return self._make_token(TokenType.PAREN, ch, start)

        if ch in DIGITS:
            return self._scan_number()

        if ch == '"':
            return self._scan_string()

        if ch in LETTERS:
            return self._scan_name()

        start = self._location()
        self._advance()
        raise error_unexpected_character(
            ch, self._span(start), self.get_source_line(start.line)
        )

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source, returning a list of tokens."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens."""
        while True:
            token = self._scan_token()
            if token is None:
                break
            yield token


def tokenize(source: str, filename: Optional[str] = None,
             multi_digit_numbers: bool = False) -> List[Token]:
    """
    Convenience function to tokenize source code.

    Args:
        source: The source code to tokenize
        filename: Optional filename for error messages
        multi_digit_numbers: Lex runs of digits as a single NUMBER token

    Returns:
        List of tokens

    Raises:
        LexError: If tokenization fails
    """
    lexer = Lexer(source, filename, multi_digit_numbers)
    return lexer.tokenize()
