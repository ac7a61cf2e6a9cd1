"""Commands that parse, query and relate nodes from the terminal."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ast_inspector.config import get_settings
from ast_inspector.core.errors import InspectorError
from ast_inspector.core.languages import resolve_language, supported_languages
from ast_inspector.core.operations import lookup_relationship, parse_and_project, query_and_project
from ast_inspector.core.parsing import SyntaxParser
from ast_inspector.core.projection import ProjectedNode

console = Console()

_MAX_TEXT_WIDTH = 40

PathArg = Annotated[Path | None, typer.Argument(help="Path to a source file.")]
CodeOpt = Annotated[str | None, typer.Option(help="Source code string to use instead of a file path.")]
LanguageOpt = Annotated[str | None, typer.Option(help="Language name or alias (e.g. js, python, ts).")]
JsonOpt = Annotated[bool, typer.Option("--json", help="Print JSON instead of a tree.")]


def _load_source(path: Path | None, code: str | None, language: str | None) -> tuple[str, SyntaxParser]:
    default = get_settings().language
    if code is not None:
        return code, SyntaxParser(resolve_language(language, None, default=default))
    if path is None:
        console.print("[red]Provide a file path or --code.[/red]")
        raise typer.Exit(1)
    resolved = resolve_language(language, path, default=default)
    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        console.print(f"[red]File not found: {escape(str(path))}[/red]")
        raise typer.Exit(1) from None
    return source, SyntaxParser(resolved)


def _snippet(text: str) -> str:
    flat = " ".join(text.split())
    if len(flat) > _MAX_TEXT_WIDTH:
        flat = flat[: _MAX_TEXT_WIDTH - 3] + "..."
    return escape(flat)


def _label(node: ProjectedNode) -> str:
    data = node.data
    style = "bold" if data.is_named else "dim"
    label = f"[{style}]{escape(node.label)}[/{style}] [cyan]{data.start_index}:{data.end_index}[/cyan]"
    if not node.children:
        label += f" [green]{_snippet(data.text)}[/green]"
    return label


def build_tree(node: ProjectedNode, tree: Tree | None = None) -> Tree:
    branch = Tree(_label(node)) if tree is None else tree.add(_label(node))
    for child in node.children:
        build_tree(child, branch)
    return branch


def _fail(exc: InspectorError) -> NoReturn:
    console.print(f"[red]{type(exc).__name__}:[/red] {escape(str(exc))}")
    raise typer.Exit(1) from exc


def parse(
    path: PathArg = None,
    code: CodeOpt = None,
    language: LanguageOpt = None,
    as_json: JsonOpt = False,
) -> None:
    """Parse source code and print its syntax tree."""
    try:
        source, parser = _load_source(path, code, language)
        root = parse_and_project(parser, source, get_settings().max_depth)
    except InspectorError as exc:
        _fail(exc)
    if as_json:
        console.print_json(data=root.model_dump(by_alias=True))
    else:
        console.print(build_tree(root))


def query(
    pattern: Annotated[str, typer.Argument(help="Tree-sitter pattern query.")],
    path: PathArg = None,
    code: CodeOpt = None,
    language: LanguageOpt = None,
    as_json: JsonOpt = False,
) -> None:
    """Run a pattern query and print every capture."""
    try:
        source, parser = _load_source(path, code, language)
        matches = query_and_project(parser, source, pattern, get_settings().max_depth)
    except InspectorError as exc:
        _fail(exc)
    if as_json:
        console.print_json(data={"matches": [m.model_dump(by_alias=True) for m in matches]})
        return
    root = Tree(f"[bold]Query matches[/bold] ({len(matches)})")
    for match in matches:
        build_tree(match, root)
    console.print(root)


def relationship(
    source_key: Annotated[str, typer.Argument(help="Source node address: offset (12) or span (3:9).")],
    target_key: Annotated[str, typer.Argument(help="Target node address: offset (12) or span (3:9).")],
    path: PathArg = None,
    code: CodeOpt = None,
    language: LanguageOpt = None,
) -> None:
    """Print the firstChild/nextSibling path from one node to another."""
    try:
        source, parser = _load_source(path, code, language)
        result = lookup_relationship(parser, source, source_key, target_key)
    except InspectorError as exc:
        _fail(exc)
    rendered = result.render() or "(same node)"
    if result.reachable:
        console.print(f"[green]{rendered}[/green]")
    else:
        console.print(f"[yellow]{rendered}[/yellow]")
        console.print("[yellow]Target is not reachable from the source node.[/yellow]")


def languages() -> None:
    """List supported languages."""
    default = get_settings().language
    table = Table(show_lines=False)
    table.add_column("language")
    table.add_column("default")
    for name in supported_languages():
        table.add_row(name, "*" if name == default else "")
    console.print(table)
