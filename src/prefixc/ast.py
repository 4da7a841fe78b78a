"""
Abstract Syntax Tree (AST) node definitions for the prefix-notation source
language.

A program is a sequence of parenthesized calls whose arguments are numbers,
strings or further calls:

    (add 2 (subtract 4 2))

parses to

    Program(body=(CallExpression(name='add', params=(
        NumberLiteral(value='2'),
        CallExpression(name='subtract', params=(
            NumberLiteral(value='4'), NumberLiteral(value='2'))),
    )),))

Nodes are frozen. The lowered, C-shaped tree lives in ``target_ast``.
"""

from dataclasses import dataclass, field, fields
from typing import Optional, Tuple, Union, Any
from abc import ABC
from .tokens import SourceSpan


# =============================================================================
# Base Classes
# =============================================================================

@dataclass(frozen=True)
class AstNode(ABC):
    """Base class for all AST nodes."""
    # Source location for error reporting; ignored by equality
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False, kw_only=True)

    @property
    def type(self) -> str:
        """Node-type tag."""
        return self.__class__.__name__

    def accept(self, visitor: "AstVisitor") -> Any:
        """Accept a visitor for traversal."""
        method_name = f"visit_{self.__class__.__name__}"
        method = getattr(visitor, method_name, visitor.generic_visit)
        return method(self)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict tagged with the node type."""
        result = {"type": self.type}
        for f in fields(self):
            if f.name == "span":
                continue
            result[f.name] = _to_plain(getattr(self, f.name))
        return result


def _to_plain(value: Any) -> Any:
    if isinstance(value, AstNode):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


class AstVisitor(ABC):
    """Base class for AST visitors."""

    def generic_visit(self, node: AstNode) -> Any:
        """Default visit method."""
        raise NotImplementedError(f"No visitor for {node.__class__.__name__}")


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass(frozen=True)
class NumberLiteral(AstNode):
    """A number, kept as the raw source text."""
    value: str


@dataclass(frozen=True)
class StringLiteral(AstNode):
    """A string literal with its quotes stripped."""
    value: str


@dataclass(frozen=True)
class CallExpression(AstNode):
    """A prefix call, e.g. ``(add 2 3)``."""
    name: str
    params: Tuple["Expression", ...] = ()


Expression = Union[NumberLiteral, StringLiteral, CallExpression]


@dataclass(frozen=True)
class Program(AstNode):
    """Root of a parsed compilation unit: the top-level forms in order."""
    body: Tuple[Expression, ...] = ()
