"""Shared fixtures and helpers for tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from tree_sitter import Node, Tree

from ast_inspector.core.parsing import ParserRegistry, SyntaxParser

_REPO_ROOT = Path(__file__).parent.parent

IF_ELSE_SOURCE = "if (x) { y(); } else { z(); }"
FUNCTION_SOURCE = "function f(a){ return a; }"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all its descendants in pre-order."""
    yield node
    for child in node.children:
        yield from walk(child)


def find_first(root: Node, node_type: str) -> Node:
    for node in walk(root):
        if node.type == node_type:
            return node
    raise LookupError(f"No {node_type} node in tree")


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def javascript_parser() -> SyntaxParser:
    """Return a parser for JavaScript."""
    return SyntaxParser("javascript")


@pytest.fixture
def registry() -> ParserRegistry:
    return ParserRegistry("javascript")


@pytest.fixture
def if_else_tree(javascript_parser: SyntaxParser) -> Tree:
    return javascript_parser.parse(IF_ELSE_SOURCE)


@pytest.fixture
def function_tree(javascript_parser: SyntaxParser) -> Tree:
    return javascript_parser.parse(FUNCTION_SOURCE)


@pytest.fixture
def if_else_source() -> str:
    return IF_ELSE_SOURCE


@pytest.fixture
def function_source() -> str:
    return FUNCTION_SOURCE


@pytest.fixture
def find_node() -> Callable[[Node, str], Node]:
    """Return a lookup for the first node of a given type, in pre-order."""
    return find_first
