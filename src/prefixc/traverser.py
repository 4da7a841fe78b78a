"""
Generic depth-first traversal over source and lowered trees.

A visitor maps node classes to a pair of optional hooks. Each hook is called
as ``hook(node, parent, context)``. For every node the traverser calls
``enter``, walks the children left to right, then calls ``exit``.

``context`` is an opaque handle threaded down the tree. Whatever ``enter``
returns (when not None) becomes the context of that node's children, so a
visitor can hand each subtree its own destination without storing anything
on the nodes themselves.
"""

from typing import Any, Callable, Dict, Iterable, Mapping, NamedTuple, Optional, Type

from . import ast
from . import target_ast
from .ast import AstNode
from .errors import error_unknown_node

Hook = Callable[[AstNode, Optional[AstNode], Any], Any]


class VisitorHooks(NamedTuple):
    """Optional enter/exit callbacks for one node type."""
    enter: Optional[Hook] = None
    exit: Optional[Hook] = None


Visitor = Mapping[Type[AstNode], VisitorHooks]


def _no_children(node: AstNode) -> Iterable[AstNode]:
    return ()


# Child order for every node type the traverser knows about
CHILDREN: Dict[Type[AstNode], Callable[[Any], Iterable[AstNode]]] = {
    ast.Program: lambda node: node.body,
    ast.CallExpression: lambda node: node.params,
    ast.NumberLiteral: _no_children,
    ast.StringLiteral: _no_children,
    target_ast.Program: lambda node: node.body,
    target_ast.ExpressionStatement: lambda node: (node.expression,),
    target_ast.CallExpression: lambda node: (node.callee, *node.arguments),
    target_ast.Identifier: _no_children,
    target_ast.NumberLiteral: _no_children,
    target_ast.StringLiteral: _no_children,
}


def children(node: AstNode) -> Iterable[AstNode]:
    """Return the children of a node in traversal order."""
    get_children = CHILDREN.get(type(node))
    if get_children is None:
        raise error_unknown_node(type(node).__name__)
    return get_children(node)


def traverse(root: AstNode, visitor: Visitor, context: Any = None) -> None:
    """
    Walk ``root`` depth first, invoking the visitor's hooks.

    Args:
        root: Tree to walk
        visitor: Mapping from node class to VisitorHooks
        context: Handle passed to the root's hooks and, unless replaced by
            an ``enter`` hook, to its descendants

    Raises:
        TraversalError: If a node of an unknown type is reached
    """
    _traverse_node(root, None, visitor, context)


def _traverse_node(node: AstNode, parent: Optional[AstNode],
                   visitor: Visitor, context: Any) -> None:
    hooks = visitor.get(type(node))
    kids = children(node)

    child_context = context
    if hooks is not None and hooks.enter is not None:
        result = hooks.enter(node, parent, context)
        if result is not None:
            child_context = result

    for child in kids:
        _traverse_node(child, node, visitor, child_context)

    if hooks is not None and hooks.exit is not None:
        hooks.exit(node, parent, context)
