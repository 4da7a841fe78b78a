"""
prefixc: a small compiler from Lisp-style prefix calls to C-style calls.

This package provides:
- Lexer: Tokenizes source code
- Parser: Builds the source AST from tokens
- Traverser: Generic depth-first walker with enter/exit hooks
- Transforms: Lowering of the source AST to the C-shaped AST
- Code generator: Renders the lowered AST to text

Usage:
    from prefixc import compile, tokenize, parse, transform, generate

    compile('(add 2 (subtract 4 2))')   # 'add(2, subtract(4, 2));'

    # Or stage by stage
    tokens = tokenize('(add 2 (subtract 4 2))')
    program = parse(tokens)
    lowered = transform(program)
    print(generate(lowered))
"""

from .tokens import (
    Token,
    TokenType,
    SourceLocation,
    SourceSpan,
)

from .lexer import (
    Lexer,
    tokenize,
)

from .parser import (
    Parser,
    parse,
)

from .ast import (
    AstNode,
    AstVisitor,
    Program,
    CallExpression,
    NumberLiteral,
    StringLiteral,
)

from . import target_ast

from .traverser import (
    VisitorHooks,
    traverse,
)

from .transforms import (
    AstTransform,
    LoweringTransform,
    transform,
)

from .codegen import (
    CodeGenerator,
    generate,
)

from .compiler import (
    CompilationResult,
    compile,
    compile_stages,
)

from .errors import (
    CompilerError,
    LexError,
    ParseError,
    TraversalError,
    CodeGenError,
    Diagnostic,
    ErrorSeverity,
)

__all__ = [
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    "SourceSpan",
    # Lexer
    "Lexer",
    "tokenize",
    # Parser
    "Parser",
    "parse",
    # Source AST
    "AstNode",
    "AstVisitor",
    "Program",
    "CallExpression",
    "NumberLiteral",
    "StringLiteral",
    # Target AST
    "target_ast",
    # Traversal and lowering
    "VisitorHooks",
    "traverse",
    "AstTransform",
    "LoweringTransform",
    "transform",
    # Code generation
    "CodeGenerator",
    "generate",
    # Pipeline
    "CompilationResult",
    "compile",
    "compile_stages",
    # Errors
    "CompilerError",
    "LexError",
    "ParseError",
    "TraversalError",
    "CodeGenError",
    "Diagnostic",
    "ErrorSeverity",
]
