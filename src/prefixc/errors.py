"""
Compiler exceptions and diagnostics.

Error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E2xx: Traversal errors
- E3xx: Code generation errors

No stage recovers from an error: the first one raised aborts the whole
compilation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List
from .tokens import SourceSpan


class ErrorSeverity(Enum):
    """Severity levels for diagnostics."""
    ERROR = "error"


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    code: str                       # E001, E101, etc.
    message: str                    # Human-readable message
    severity: ErrorSeverity
    span: Optional[SourceSpan] = None
    source_line: Optional[str] = None   # The actual line of source code
    hints: List[str] = field(default_factory=list)

    def format(self, show_source: bool = True) -> str:
        """Format the diagnostic for display."""
        parts = []

        # Header: location: severity[code]: message
        header = f"{self.severity.value}[{self.code}]: {self.message}"
        if self.span is not None:
            header = f"{self.span.start}: {header}"
        parts.append(header)

        # Source line with caret
        if show_source and self.span is not None and self.source_line is not None:
            parts.append("  |")
            line_num = str(self.span.start.line)
            parts.append(f"{line_num:>3} | {self.source_line}")

            col = self.span.start.column
            if self.span.start.line == self.span.end.line:
                end_col = self.span.end.column
            else:
                end_col = len(self.source_line) + 1
            underline_len = max(1, end_col - col)
            parts.append(f"    | {' ' * (col - 1)}{'^' * underline_len}")

        for hint in self.hints:
            parts.append(f"    = hint: {hint}")

        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        result = {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
            "range": None,
            "hints": self.hints,
        }
        if self.span is not None:
            result["range"] = {
                "start": {
                    "line": self.span.start.line,
                    "column": self.span.start.column,
                    "offset": self.span.start.offset,
                },
                "end": {
                    "line": self.span.end.line,
                    "column": self.span.end.column,
                    "offset": self.span.end.offset,
                },
            }
        return result


class CompilerError(Exception):
    """Base exception for compiler errors."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.diagnostic.format()


class LexError(CompilerError):
    """Error during lexical analysis (E0xx)."""
    pass


class ParseError(CompilerError):
    """Error during parsing (E1xx)."""
    pass


class TraversalError(CompilerError):
    """Unknown node met while walking a tree (E2xx)."""
    pass


class CodeGenError(CompilerError):
    """Unknown node met while emitting code (E3xx)."""
    pass


# --- Lexer error codes ---

def error_unexpected_character(char: str, span: SourceSpan, source_line: str = None) -> LexError:
    """E001: Unexpected character."""
    diag = Diagnostic(
        code="E001",
        message=f"unexpected character '{char}'",
        severity=ErrorSeverity.ERROR,
        span=span,
        source_line=source_line,
        hints=["only parentheses, digits, letters and double-quoted strings are allowed"],
    )
    return LexError(diag)


def error_unterminated_string(span: SourceSpan, source_line: str = None) -> LexError:
    """E002: Unterminated string literal."""
    diag = Diagnostic(
        code="E002",
        message="unterminated string literal",
        severity=ErrorSeverity.ERROR,
        span=span,
        source_line=source_line,
        hints=['string literals must be closed with a matching "'],
    )
    return LexError(diag)


# --- Parser error codes ---

def error_unexpected_token(expected: str, found: str, span: SourceSpan,
                           source_line: str = None) -> ParseError:
    """E101: Unexpected token."""
    diag = Diagnostic(
        code="E101",
        message=f"expected {expected}, found {found}",
        severity=ErrorSeverity.ERROR,
        span=span,
        source_line=source_line,
    )
    return ParseError(diag)


def error_unexpected_eof(expected: str, span: SourceSpan,
                         source_line: str = None) -> ParseError:
    """E102: Unexpected end of input."""
    diag = Diagnostic(
        code="E102",
        message=f"unexpected end of input, expected {expected}",
        severity=ErrorSeverity.ERROR,
        span=span,
        source_line=source_line,
        hints=["check that every '(' has a matching ')'"],
    )
    return ParseError(diag)


def error_missing_call_name(found: str, span: SourceSpan,
                            source_line: str = None) -> ParseError:
    """E103: A call without a function name."""
    diag = Diagnostic(
        code="E103",
        message=f"expected function name after '(', found {found}",
        severity=ErrorSeverity.ERROR,
        span=span,
        source_line=source_line,
    )
    return ParseError(diag)


def error_nesting_too_deep(span: Optional[SourceSpan] = None,
                           source_line: str = None) -> ParseError:
    """E104: Calls nested deeper than the interpreter stack allows."""
    diag = Diagnostic(
        code="E104",
        message="calls are nested too deeply to compile",
        severity=ErrorSeverity.ERROR,
        span=span,
        source_line=source_line,
        hints=["split the expression into several top-level calls"],
    )
    return ParseError(diag)


# --- Internal consistency errors ---

def error_unknown_node(node_type: str) -> TraversalError:
    """E201: Traverser met a node type it has no children rule for."""
    diag = Diagnostic(
        code="E201",
        message=f"cannot traverse unknown node type '{node_type}'",
        severity=ErrorSeverity.ERROR,
    )
    return TraversalError(diag)


def error_cannot_generate(node_type: str) -> CodeGenError:
    """E301: Code generator met a node type it cannot render."""
    diag = Diagnostic(
        code="E301",
        message=f"cannot generate code for node type '{node_type}'",
        severity=ErrorSeverity.ERROR,
        hints=["only lowered trees can be rendered; run transform() first"],
    )
    return CodeGenError(diag)
