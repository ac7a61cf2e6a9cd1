"""Tests for the typer CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from ast_inspector.cli.app import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [[], ["parse"], ["query"], ["relationship"], ["serve"]],
    ids=["root", "parse", "query", "relationship", "serve"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


class TestParseCommand:
    def test_parse_code_prints_tree(self, function_source: str) -> None:
        result = runner.invoke(app, ["parse", "--code", function_source])

        assert result.exit_code == 0, result.output
        assert "program" in result.output
        assert "function_declaration" in result.output

    def test_parse_file_detects_language(self, tmp_path: Path) -> None:
        source = tmp_path / "sample.py"
        source.write_text("def f():\n    return 1\n", encoding="utf-8")

        result = runner.invoke(app, ["parse", str(source)])

        assert result.exit_code == 0, result.output
        assert "function_definition" in result.output

    def test_parse_json(self, function_source: str) -> None:
        result = runner.invoke(app, ["parse", "--code", function_source, "--json"])

        assert result.exit_code == 0, result.output
        assert '"isNamed"' in result.output
        assert '"startIndex"' in result.output

    def test_parse_requires_input(self) -> None:
        result = runner.invoke(app, ["parse"])
        assert result.exit_code == 1

    def test_parse_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.js")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_parse_unknown_language(self) -> None:
        result = runner.invoke(app, ["parse", "--code", "x", "--language", "cobol"])
        assert result.exit_code == 1
        assert "UnsupportedLanguage" in result.output

    def test_parse_deep_input_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AST_INSPECTOR_MAX_DEPTH", "10")

        result = runner.invoke(app, ["parse", "--code", "x = " + "[" * 20 + "]" * 20 + ";"])

        assert result.exit_code == 1
        assert "TreeTooDeep" in result.output


class TestQueryCommand:
    def test_query_prints_captures(self, if_else_source: str) -> None:
        result = runner.invoke(app, ["query", "(identifier) @id", "--code", if_else_source])

        assert result.exit_code == 0, result.output
        assert "Query matches" in result.output
        assert "(3)" in result.output

    def test_invalid_query(self, if_else_source: str) -> None:
        result = runner.invoke(app, ["query", "(if_statement", "--code", if_else_source])

        assert result.exit_code == 1
        assert "QueryFailure" in result.output


class TestRelationshipCommand:
    def test_prints_path(self, if_else_source: str) -> None:
        end = len(if_else_source)
        result = runner.invoke(app, ["relationship", f"0:{end}", "3:6", "--code", if_else_source])

        assert result.exit_code == 0, result.output
        assert ".firstChild.nextSibling" in result.output

    def test_same_node(self, if_else_source: str) -> None:
        result = runner.invoke(app, ["relationship", "3:6", "3:6", "--code", if_else_source])

        assert result.exit_code == 0, result.output
        assert "(same node)" in result.output

    def test_unreachable(self, if_else_source: str) -> None:
        end = len(if_else_source)
        result = runner.invoke(app, ["relationship", "3:6", f"0:{end}", "--code", if_else_source])

        assert result.exit_code == 0, result.output
        assert "not reachable" in result.output

    def test_bad_address(self, if_else_source: str) -> None:
        result = runner.invoke(app, ["relationship", "0", "9999", "--code", if_else_source])

        assert result.exit_code == 1
        assert "BadAddress" in result.output


def test_languages_lists_default() -> None:
    result = runner.invoke(app, ["languages"])
    assert result.exit_code == 0
    assert "javascript" in result.output
