"""Sibling-link helpers over tree-sitter nodes."""

from __future__ import annotations

from tree_sitter import Node


def first_child(node: Node) -> Node | None:
    """Follow the first-child link; ``None`` for a leaf.

    ``Node.child(0)`` raises ``IndexError`` on a leaf, a cursor step does not.
    """
    cursor = node.walk()
    if not cursor.goto_first_child():
        return None
    return cursor.node
