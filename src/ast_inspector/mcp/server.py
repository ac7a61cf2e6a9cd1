"""FastMCP server exposing ast-inspector tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from ast_inspector.core.errors import InspectorError
from ast_inspector.core.operations import lookup_relationship, parse_and_project, query_and_project
from ast_inspector.core.parsing import ParserRegistry
from ast_inspector.core.projection import DEFAULT_MAX_DEPTH


def create_mcp_server(registry: ParserRegistry, max_depth: int = DEFAULT_MAX_DEPTH) -> FastMCP:
    """Create a FastMCP server wired to the given parser registry."""

    mcp = FastMCP(
        "ast-inspector",
        instructions="Parse code, run tree-sitter queries, and inspect node relationships.",
    )

    @mcp.tool()
    def parse(code: str, language: str | None = None) -> dict[str, Any]:
        """Parse source code and return its projected syntax tree."""
        try:
            root = parse_and_project(registry.get(language), code, max_depth)
        except InspectorError as exc:
            return {"error": str(exc), "kind": type(exc).__name__}
        return root.model_dump(by_alias=True)

    @mcp.tool()
    def query(code: str, query: str, language: str | None = None) -> dict[str, Any]:
        """Run a tree-sitter pattern query and return one projected tree per capture."""
        try:
            matches = query_and_project(registry.get(language), code, query, max_depth)
        except InspectorError as exc:
            return {"error": str(exc), "kind": type(exc).__name__}
        return {"matches": [m.model_dump(by_alias=True) for m in matches]}

    @mcp.tool()
    def relationship(
        code: str, source_node_key: str, target_node_key: str, language: str | None = None
    ) -> dict[str, Any]:
        """Return the firstChild/nextSibling path between two node addresses ("12" or "3:9")."""
        try:
            path = lookup_relationship(registry.get(language), code, source_node_key, target_node_key)
        except InspectorError as exc:
            return {"error": str(exc), "kind": type(exc).__name__}
        return {
            "relationship": path.render(),
            "steps": [step.value for step in path.steps],
            "reachable": path.reachable,
        }

    return mcp
