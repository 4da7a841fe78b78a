"""
AST transformations.

Usage:
    from prefixc.transforms import LoweringTransform

    target = LoweringTransform().transform(program)

or simply ``transform(program)``.
"""

from .base import AstTransform
from .lowering import LoweringTransform, transform

__all__ = [
    'AstTransform',
    'LoweringTransform',
    'transform',
]
