"""Projection of tree-sitter nodes into serializable tree nodes.

A ``ProjectedNode`` carries everything a tree widget needs (key, label, icon,
children) plus a snapshot of the source node's attributes. JSON field names
are camelCase so the payload matches what the UI already consumes.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from tree_sitter import Node

from ast_inspector.core.errors import TreeTooDeep
from ast_inspector.core.icons import icon_for
from ast_inspector.core.nodes import first_child

# Nested pydantic serialization stops well before a few hundred levels.
DEFAULT_MAX_DEPTH = 120


class NodeData(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    type: str
    is_named: bool
    start_index: int
    end_index: int
    text: str
    type_id: int
    sexp: str = Field(default="", alias="toString")


class ProjectedNode(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    key: str
    label: str
    data: NodeData
    icon: str = ""
    children: list[ProjectedNode] = Field(default_factory=list)


ProjectedNode.model_rebuild()  # necessary for recursive types


def make_key(start_byte: int, end_byte: int) -> str:
    """Legacy tree key: the decimal sum of the span offsets.

    Not injective, ``(0, 10)`` and ``(4, 6)`` share the key ``"10"``.
    """
    return str(start_byte + end_byte)


def _node_text(node: Node) -> str:
    raw = node.text
    if raw is None:
        return ""
    return raw.decode("utf-8", errors="replace")


def _build(node: Node, children: list[ProjectedNode]) -> ProjectedNode:
    # The first-child link decides, a stale children collection does not.
    has_children = first_child(node) is not None

    return ProjectedNode(
        key=make_key(node.start_byte, node.end_byte),
        label=node.type,
        data=NodeData(
            type=node.type,
            is_named=node.is_named,
            start_index=node.start_byte,
            end_index=node.end_byte,
            text=_node_text(node),
            type_id=node.kind_id,
            sexp=str(node),
        ),
        icon=icon_for(node.type),
        children=children if has_children else [],
    )


def project_node(node: Node, max_depth: int = DEFAULT_MAX_DEPTH) -> ProjectedNode:
    """Project ``node`` and its descendants, children before their parent.

    Raises ``TreeTooDeep`` when the subtree nests more than ``max_depth``
    levels, counting ``node`` itself as level 1.
    """
    built: list[ProjectedNode] = []
    stack: list[tuple[Node, int, bool]] = [(node, 1, False)]

    while stack:
        current, depth, expanded = stack.pop()
        if depth > max_depth:
            raise TreeTooDeep(f"Syntax tree nests deeper than {max_depth} levels")
        children = current.children
        if not expanded:
            stack.append((current, depth, True))
            stack.extend((child, depth + 1, False) for child in reversed(children))
            continue
        split = len(built) - len(children)
        projected_children = built[split:]
        del built[split:]
        built.append(_build(current, projected_children))

    return built[0]


def project_captures(nodes: Iterable[Node], max_depth: int = DEFAULT_MAX_DEPTH) -> list[ProjectedNode]:
    """Project each capture on its own; order, overlaps and duplicates are kept."""
    return [project_node(node, max_depth) for node in nodes]
