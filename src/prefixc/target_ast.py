"""
Node definitions for the lowered, C-shaped tree.

Produced by the lowering transform and consumed by the code generator:

    Program
      ExpressionStatement
        CallExpression(callee=Identifier('add'), arguments=(...))

Sequences are tuples: every node is complete and immutable once built.
"""

from dataclasses import dataclass
from typing import Tuple, Union
from .ast import AstNode


@dataclass(frozen=True)
class TargetNode(AstNode):
    """Base class for lowered nodes."""
    pass


@dataclass(frozen=True)
class Identifier(TargetNode):
    """A function name in callee position."""
    name: str


@dataclass(frozen=True)
class NumberLiteral(TargetNode):
    value: str


@dataclass(frozen=True)
class StringLiteral(TargetNode):
    value: str


@dataclass(frozen=True)
class CallExpression(TargetNode):
    """A call, e.g. ``add(2, 3)``."""
    callee: Identifier
    arguments: Tuple["Expression", ...] = ()


Expression = Union[NumberLiteral, StringLiteral, CallExpression]


@dataclass(frozen=True)
class ExpressionStatement(TargetNode):
    """A top-level call, rendered with a trailing ``;``."""
    expression: CallExpression


@dataclass(frozen=True)
class Program(TargetNode):
    body: Tuple[Union[ExpressionStatement, Expression], ...] = ()
