"""
Tests for the command line interface.
"""

import io
import json
import sys

import pytest
from prefixc.__main__ import main


class TestCompileCommand:
    """Test the compile subcommand."""

    def test_expression(self, capsys):
        assert main(["compile", "-e", "(add 2 (subtract 4 2))"]) == 0
        assert capsys.readouterr().out.strip() == "add(2, subtract(4, 2));"

    def test_file(self, tmp_path, capsys):
        source = tmp_path / "prog.lisp"
        source.write_text('(print "hi")\n(add 1 2)\n')
        assert main(["compile", str(source)]) == 0
        assert capsys.readouterr().out.splitlines() == ['print("hi");', "add(1, 2);"]

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("(f 1)"))
        assert main(["compile"]) == 0
        assert capsys.readouterr().out.strip() == "f(1);"

    def test_multi_digit_flag(self, capsys):
        assert main(["compile", "-e", "(f 12)", "--multi-digit-numbers"]) == 0
        assert capsys.readouterr().out.strip() == "f(12);"

    def test_stages(self, capsys):
        assert main(["compile", "-e", "(f 1)", "--stages"]) == 0
        out = capsys.readouterr().out
        for label in ("input", "tokens", "ast", "target", "output"):
            assert f"== {label}" in out
        assert '"CallExpression"' in out
        assert '"f(1);"' in out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["compile", str(tmp_path / "nope.lisp")]) == 1
        assert "File not found" in capsys.readouterr().err


class TestDumpCommands:
    """Test the JSON stage dumps."""

    def test_tokens(self, capsys):
        assert main(["tokens", "-e", "(f 1)"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [t["type"] for t in data] == ["paren", "name", "number", "paren"]

    def test_parse(self, capsys):
        assert main(["parse", "-e", "(f 1)"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["body"][0]["name"] == "f"

    def test_lower(self, capsys):
        assert main(["lower", "-e", "(f 1)"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["body"][0]["type"] == "ExpressionStatement"


class TestErrors:
    """Test error reporting."""

    def test_compile_error(self, capsys):
        assert main(["compile", "-e", "(add 2 #)"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "E001" in captured.err
        assert "'#'" in captured.err

    def test_nesting_too_deep(self, capsys):
        depth = sys.getrecursionlimit() * 2
        assert main(["compile", "-e", "(f " * depth + ")" * depth]) == 1
        assert "E104" in capsys.readouterr().err

    def test_json_errors(self, capsys):
        assert main(["compile", "-e", "(add 2", "--json-errors"]) == 1
        data = json.loads(capsys.readouterr().err)
        assert data["code"] == "E102"
        assert data["range"]["start"]["line"] == 1

    def test_verbose_logs_stages(self, capsys):
        assert main(["compile", "-e", "(f 1)", "-v"]) == 0
        assert "[DEBUG] tokenized 4 token(s)" in capsys.readouterr().err

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            main([])
