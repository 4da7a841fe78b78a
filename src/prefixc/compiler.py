"""
The whole pipeline: tokenize, parse, lower, generate.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .tokens import Token
from .lexer import tokenize
from .parser import parse
from .transforms import transform
from .codegen import generate
from . import ast
from . import target_ast
from .errors import error_nesting_too_deep

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompilationResult:
    """Every intermediate product of one compilation."""
    source: str
    tokens: List[Token]
    program: ast.Program
    target: target_ast.Program
    output: str

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "tokens": [token.to_dict() for token in self.tokens],
            "ast": self.program.to_dict(),
            "target": self.target.to_dict(),
            "output": self.output,
        }


def compile_stages(source: str, filename: Optional[str] = None,
                   multi_digit_numbers: bool = False) -> CompilationResult:
    """
    Run all stages over ``source`` and keep what each one produced.

    Parsing, lowering and generation recurse once per nesting level, so
    input nested beyond the interpreter's recursion limit is reported as
    ParseError E104.

    Raises:
        CompilerError: From whichever stage fails first
    """
    tokens = tokenize(source, filename, multi_digit_numbers)
    logger.debug("tokenized %d token(s)", len(tokens))

    try:
        program = parse(tokens, filename, source)
        logger.debug("parsed %d top-level expression(s)", len(program.body))

        target = transform(program)

        output = generate(target)
    except RecursionError:
        span = tokens[0].span if tokens else None
        source_line = None
        if span is not None:
            source_line = source.splitlines()[span.start.line - 1]
        raise error_nesting_too_deep(span, source_line) from None
    logger.debug("generated %d character(s)", len(output))

    return CompilationResult(source, tokens, program, target, output)


def compile(source: str, filename: Optional[str] = None,
            multi_digit_numbers: bool = False) -> str:
    """
    Compile prefix-notation source to C-style calls.

        >>> compile("(add 2 (subtract 4 2))")
        'add(2, subtract(4, 2));'

    Raises:
        LexError, ParseError: On malformed or too deeply nested input
    """
    return compile_stages(source, filename, multi_digit_numbers).output
