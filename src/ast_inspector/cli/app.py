import typer

from ast_inspector.cli.serve import serve_app
from ast_inspector.cli.tree import languages, parse, query, relationship

app = typer.Typer(
    name="ast-inspector",
    help="AST Inspector CLI: parse code, run tree-sitter queries, and relate nodes.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("parse")(parse)
app.command("query")(query)
app.command("relationship")(relationship)
app.command("languages")(languages)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
