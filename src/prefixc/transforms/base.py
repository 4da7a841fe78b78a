"""
AST transformation framework.

A transform takes one tree and returns a new one. Transforms never modify
their input.
"""

from abc import ABC, abstractmethod

from ..ast import AstNode


class AstTransform(ABC):
    """
    Base class for AST transformations.

    Transforms are applied to a Program and return a new Program.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this transform for debugging/logging."""
        pass

    @abstractmethod
    def transform(self, program: AstNode) -> AstNode:
        """
        Apply this transform to a program.

        Args:
            program: The input program AST

        Returns:
            A freshly built program
        """
        pass
