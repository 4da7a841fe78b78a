"""
Lowering from the prefix-notation AST to the C-shaped target AST.

    CallExpression(name='add', params=(2, 3))        (top level)
        -> ExpressionStatement(CallExpression(Identifier('add'), (2, 3)))

    CallExpression(name='subtract', params=(4, 2))   (argument position)
        -> CallExpression(Identifier('subtract'), (4, 2))

The lowering is a set of traverser hooks. The traversal context is the list
the current node's lowered form must be appended to: the new Program's body
at the root, and the argument list of the enclosing call below it. A call
opens its argument list on enter and is built from it on exit, once all of
its params have been lowered.
"""

import logging
from typing import List, Optional

from .. import ast
from .. import target_ast
from ..traverser import Visitor, VisitorHooks, traverse
from .base import AstTransform

logger = logging.getLogger(__name__)


class _Lowering:
    """Hooks for one lowering run."""

    def __init__(self):
        # Argument lists of the calls currently being lowered, innermost last
        self.open_calls: List[List[target_ast.TargetNode]] = []

    def visitor(self) -> Visitor:
        return {
            ast.NumberLiteral: VisitorHooks(enter=self.enter_number),
            ast.StringLiteral: VisitorHooks(enter=self.enter_string),
            ast.CallExpression: VisitorHooks(enter=self.enter_call, exit=self.exit_call),
        }

    def enter_number(self, node: ast.NumberLiteral, parent: Optional[ast.AstNode],
                     output: List[target_ast.TargetNode]) -> None:
        output.append(target_ast.NumberLiteral(node.value, span=node.span))

    def enter_string(self, node: ast.StringLiteral, parent: Optional[ast.AstNode],
                     output: List[target_ast.TargetNode]) -> None:
        output.append(target_ast.StringLiteral(node.value, span=node.span))

    def enter_call(self, node: ast.CallExpression, parent: Optional[ast.AstNode],
                   output: List[target_ast.TargetNode]) -> List[target_ast.TargetNode]:
        arguments: List[target_ast.TargetNode] = []
        self.open_calls.append(arguments)
        # Params of this call land in its argument list
        return arguments

    def exit_call(self, node: ast.CallExpression, parent: Optional[ast.AstNode],
                  output: List[target_ast.TargetNode]) -> None:
        arguments = self.open_calls.pop()
        call = target_ast.CallExpression(
            target_ast.Identifier(node.name, span=node.span),
            tuple(arguments),
            span=node.span,
        )
        if isinstance(parent, ast.CallExpression):
            output.append(call)
        else:
            output.append(target_ast.ExpressionStatement(call, span=node.span))


class LoweringTransform(AstTransform):
    """Rewrite a source Program into a target Program."""

    @property
    def name(self) -> str:
        return "lowering"

    def transform(self, program: ast.Program) -> target_ast.Program:
        body: List[target_ast.TargetNode] = []
        traverse(program, _Lowering().visitor(), body)
        logger.debug("%s: lowered %d top-level statement(s)", self.name, len(body))
        return target_ast.Program(tuple(body), span=program.span)


def transform(program: ast.Program) -> target_ast.Program:
    """
    Convenience function to lower a source program.

    Raises:
        TraversalError: If the tree holds a node of an unknown type
    """
    return LoweringTransform().transform(program)
