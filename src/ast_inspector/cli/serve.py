import typer
from rich.console import Console

from ast_inspector.config import get_settings

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 3030,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from ast_inspector.api.app import create_app

    settings = get_settings()
    app = create_app(settings)
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    from ast_inspector.core.parsing import ParserRegistry
    from ast_inspector.mcp.server import create_mcp_server

    settings = get_settings()
    server = create_mcp_server(ParserRegistry(settings.language), settings.max_depth)
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
