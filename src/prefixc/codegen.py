"""
C-style code generation from the lowered tree.

    Program                  statements joined by newlines
    ExpressionStatement      expression followed by ';'
    CallExpression           callee(arg, arg, ...)
    Identifier               name
    NumberLiteral            value, verbatim
    StringLiteral            "value"
"""

from typing import Any

from .ast import AstVisitor
from .target_ast import (
    TargetNode, Program, ExpressionStatement, CallExpression,
    Identifier, NumberLiteral, StringLiteral,
)
from .errors import error_cannot_generate


class CodeGenerator(AstVisitor):
    """Renders lowered nodes to text, one visit method per node type."""

    def generate(self, node: Any) -> str:
        if not isinstance(node, TargetNode):
            raise error_cannot_generate(type(node).__name__)
        # Inlined AstNode.accept lookup
        method = getattr(self, f"visit_{node.__class__.__name__}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: Any) -> str:
        raise error_cannot_generate(type(node).__name__)

    def visit_Program(self, node: Program) -> str:
        return "\n".join(map(self.generate, node.body))

    def visit_ExpressionStatement(self, node: ExpressionStatement) -> str:
        return self.generate(node.expression) + ";"

    def visit_CallExpression(self, node: CallExpression) -> str:
        args = ", ".join(map(self.generate, node.arguments))
        return f"{self.generate(node.callee)}({args})"

    def visit_Identifier(self, node: Identifier) -> str:
        return node.name

    def visit_NumberLiteral(self, node: NumberLiteral) -> str:
        return node.value

    def visit_StringLiteral(self, node: StringLiteral) -> str:
        return f'"{node.value}"'


def generate(node: TargetNode) -> str:
    """
    Convenience function to render a lowered tree.

    Raises:
        CodeGenError: If the tree holds a node that cannot be rendered
    """
    return CodeGenerator().generate(node)
