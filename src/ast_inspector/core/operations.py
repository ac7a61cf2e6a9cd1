"""The three request-level operations.

Each call re-parses ``code`` from scratch; trees are never cached between
calls, so results depend only on the arguments.
"""

from __future__ import annotations

from ast_inspector.core.parsing import SyntaxParser
from ast_inspector.core.projection import DEFAULT_MAX_DEPTH, ProjectedNode, project_captures, project_node
from ast_inspector.core.relationship import NodeAddress, RelationshipPath, resolve_path


def parse_and_project(parser: SyntaxParser, code: str, max_depth: int = DEFAULT_MAX_DEPTH) -> ProjectedNode:
    tree = parser.parse(code)
    return project_node(tree.root_node, max_depth)


def query_and_project(
    parser: SyntaxParser, code: str, query: str, max_depth: int = DEFAULT_MAX_DEPTH
) -> list[ProjectedNode]:
    tree = parser.parse(code)
    return project_captures(parser.captures(tree, query), max_depth)


def _as_address(value: str | NodeAddress) -> NodeAddress:
    if isinstance(value, NodeAddress):
        return value
    return NodeAddress.parse(value)


def lookup_relationship(
    parser: SyntaxParser,
    code: str,
    source: str | NodeAddress,
    target: str | NodeAddress,
) -> RelationshipPath:
    """Compute the path from ``source`` to ``target``.

    Addresses are either ``NodeAddress`` values or strings accepted by
    ``NodeAddress.parse``. Raises ``BadAddress`` before parsing if either one
    is malformed.
    """
    source_address = _as_address(source)
    target_address = _as_address(target)
    tree = parser.parse(code)
    return resolve_path(tree.root_node, source_address, target_address)
