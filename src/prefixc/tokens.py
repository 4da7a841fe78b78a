"""
Token types for the prefixc lexer.

Error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E2xx: Traversal errors
- E3xx: Code generation errors
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    """All token types recognized by the lexer."""

    PAREN = "paren"             # ( or )
    NUMBER = "number"           # 7 (a single digit unless multi-digit lexing is on)
    STRING = "string"           # "hello"
    NAME = "name"               # add, subtract


@dataclass(frozen=True)
class SourceLocation:
    """Represents a position in source code."""
    line: int           # 1-indexed line number
    column: int         # 1-indexed column number
    offset: int         # 0-indexed character offset from start
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a range in source code."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"


@dataclass(frozen=True)
class Token:
    """A single token from the lexer."""
    type: TokenType
    value: str              # Token text (string contents without quotes)
    lexeme: str             # The original source text
    span: SourceSpan        # Location in source

    def __str__(self) -> str:
        return f"{self.type.name}({self.value!r})"

    @property
    def is_open_paren(self) -> bool:
        return self.type == TokenType.PAREN and self.value == "("

    @property
    def is_close_paren(self) -> bool:
        return self.type == TokenType.PAREN and self.value == ")"

    def describe(self) -> str:
        """Short human-readable description used in error messages."""
        if self.type == TokenType.PAREN:
            return f"'{self.value}'"
        return f"{self.type.value} {self.lexeme}"

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict."""
        return {"type": self.type.value, "value": self.value}
