"""
Unit tests for C-style code generation.
"""

import pytest
from prefixc import generate, CodeGenerator, CodeGenError, Program, NumberLiteral
from prefixc import target_ast as t


def call(name, *args):
    return t.CallExpression(t.Identifier(name), tuple(args))


class TestGenerate:
    """Test rendering of each node type."""

    def test_identifier(self):
        assert generate(t.Identifier("add")) == "add"

    def test_number_is_verbatim(self):
        assert generate(t.NumberLiteral("007")) == "007"

    def test_string_is_quoted(self):
        assert generate(t.StringLiteral("hi there")) == '"hi there"'

    def test_call_without_arguments(self):
        assert generate(call("now")) == "now()"

    def test_call_arguments_separator(self):
        assert generate(call("f", t.NumberLiteral("1"), t.StringLiteral("a"))) == 'f(1, "a")'

    def test_statement_semicolon(self):
        assert generate(t.ExpressionStatement(call("f"))) == "f();"

    def test_nested(self):
        tree = t.ExpressionStatement(
            call("add", t.NumberLiteral("2"),
                 call("subtract", t.NumberLiteral("4"), t.NumberLiteral("2")))
        )
        assert generate(tree) == "add(2, subtract(4, 2));"

    def test_program_joins_with_newlines(self):
        tree = t.Program((
            t.ExpressionStatement(call("a")),
            t.ExpressionStatement(call("b")),
        ))
        assert generate(tree) == "a();\nb();"

    def test_empty_program(self):
        assert generate(t.Program(())) == ""

    def test_generator_class(self):
        assert CodeGenerator().generate(t.Identifier("x")) == "x"


class TestErrors:
    """Test unknown node handling."""

    def test_source_node_rejected(self):
        """Unlowered trees cannot be rendered."""
        with pytest.raises(CodeGenError) as exc_info:
            generate(Program((NumberLiteral("1"),)))
        assert exc_info.value.code == "E301"
        assert "Program" in str(exc_info.value)

    def test_nested_unknown_node(self):
        tree = call("f", NumberLiteral("1"))
        with pytest.raises(CodeGenError):
            generate(tree)

    def test_non_node(self):
        with pytest.raises(CodeGenError) as exc_info:
            generate("add(1)")
        assert "str" in str(exc_info.value)
