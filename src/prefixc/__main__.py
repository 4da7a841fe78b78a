#!/usr/bin/env python3
"""
CLI for the prefixc compiler.

Usage:
    python -m prefixc compile [FILE] [-e SOURCE] [--stages]
    python -m prefixc tokens [FILE] [-e SOURCE]
    python -m prefixc parse [FILE] [-e SOURCE]
    python -m prefixc lower [FILE] [-e SOURCE]

With neither FILE nor -e, source is read from stdin.

Examples:
    # Compile an expression
    python -m prefixc compile -e '(add 2 (subtract 4 2))'

    # Show every stage of the pipeline
    python -m prefixc compile -e '(add 2 (subtract 4 2))' --stages

    # Dump the parsed tree of a file as JSON
    python -m prefixc parse program.lisp
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from termcolor import colored

from .compiler import compile_stages
from .errors import CompilerError

logger = logging.getLogger("prefixc")

# Stage name -> (result key, color) for --stages output
STAGES = [
    ("input", "source", "red"),
    ("tokens", "tokens", "blue"),
    ("ast", "ast", "green"),
    ("target", "target", "cyan"),
    ("output", "output", "yellow"),
]


def configure_logging(verbose: bool) -> None:
    """Send debug records from the compiler to stderr."""
    for old in list(logger.handlers):
        logger.removeHandler(old)
    if not verbose:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def read_source(args) -> tuple:
    """Return (source, filename) from -e, FILE or stdin."""
    if args.expr is not None:
        return args.expr, None
    if args.file is None or args.file == "-":
        return sys.stdin.read(), "<stdin>"

    source_path = Path(args.file)
    if not source_path.exists():
        raise FileNotFoundError(source_path)
    return source_path.read_text(), str(source_path)


def dump(data) -> str:
    return json.dumps(data, indent=2)


def report_error(error: CompilerError, as_json: bool) -> None:
    if as_json:
        print(dump(error.diagnostic.to_json()), file=sys.stderr)
        return
    header, _, rest = str(error).partition("\n")
    print(colored(header, "red", attrs=["bold"]), file=sys.stderr)
    if rest:
        print(rest, file=sys.stderr)


def cmd_compile(result, args) -> None:
    if not args.stages:
        print(result.output)
        return
    data = result.to_dict()
    for label, key, color in STAGES:
        print(colored(f"== {label}", color, attrs=["bold"]))
        print(colored(dump(data[key]), color))


def cmd_tokens(result, args) -> None:
    print(dump([token.to_dict() for token in result.tokens]))


def cmd_parse(result, args) -> None:
    print(dump(result.program.to_dict()))


def cmd_lower(result, args) -> None:
    print(dump(result.target.to_dict()))


COMMANDS = {
    "compile": cmd_compile,
    "tokens": cmd_tokens,
    "parse": cmd_parse,
    "lower": cmd_lower,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python -m prefixc',
        description='Compile Lisp-style prefix calls to C-style calls',
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('file', nargs='?', help='Source file (default: stdin)')
    common.add_argument('-e', '--expr', metavar='SOURCE',
                        help='Compile SOURCE instead of reading a file')
    common.add_argument('--multi-digit-numbers', action='store_true',
                        help='Lex runs of digits as one number')
    common.add_argument('--json-errors', action='store_true',
                        help='Report errors as JSON diagnostics')
    common.add_argument('-v', '--verbose', action='store_true',
                        help='Log each compiler stage')

    subparsers = parser.add_subparsers(dest='action', required=True)

    compile_parser = subparsers.add_parser('compile', parents=[common],
                                           help='Compile to C-style calls')
    compile_parser.add_argument('--stages', action='store_true',
                                help='Print every intermediate stage')
    subparsers.add_parser('tokens', parents=[common], help='Print the tokens as JSON')
    subparsers.add_parser('parse', parents=[common], help='Print the parsed AST as JSON')
    subparsers.add_parser('lower', parents=[common], help='Print the lowered AST as JSON')

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        source, filename = read_source(args)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e}", file=sys.stderr)
        return 1

    try:
        result = compile_stages(source, filename, args.multi_digit_numbers)
    except CompilerError as e:
        report_error(e, args.json_errors)
        return 1

    COMMANDS[args.action](result, args)
    return 0


if __name__ == '__main__':
    sys.exit(main())
