"""Node addressing and navigation paths between two nodes of one tree.

A path is a sequence of ``firstChild`` / ``nextSibling`` moves. Replayed
left-to-right from the source node it reaches the target node, e.g.
``.firstChild.nextSibling`` is the second child of the source.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tree_sitter import Node

from ast_inspector.core.errors import BadAddress
from ast_inspector.core.nodes import first_child


class Step(str, Enum):
    FIRST_CHILD = "firstChild"
    NEXT_SIBLING = "nextSibling"


@dataclass(frozen=True)
class NodeAddress:
    """Byte span used to relocate a node in a freshly parsed tree."""

    start: int
    end: int

    @property
    def key(self) -> str:
        """Legacy key, the decimal sum of both offsets. Not unique."""
        return str(self.start + self.end)

    @property
    def span_key(self) -> str:
        return f"{self.start}:{self.end}"

    @classmethod
    def of(cls, node: Node) -> NodeAddress:
        return cls(node.start_byte, node.end_byte)

    @classmethod
    def parse(cls, text: str) -> NodeAddress:
        """Parse ``"N"`` (a single offset) or ``"S:E"`` (a span).

        Raises ``BadAddress`` for anything else, negative offsets, or ``S > E``.
        """
        raw = text.strip()
        start_raw, sep, end_raw = raw.partition(":")
        try:
            start = int(start_raw)
            end = int(end_raw) if sep else start
        except ValueError:
            raise BadAddress(f"Malformed node address: {text!r}") from None
        if start < 0 or end < start:
            raise BadAddress(f"Invalid node address: {text!r}")
        return cls(start, end)


@dataclass(frozen=True)
class RelationshipPath:
    steps: tuple[Step, ...] = ()
    reachable: bool = True

    def render(self) -> str:
        return "".join(f".{step.value}" for step in self.steps)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.steps)


def resolve_node(root: Node, address: NodeAddress) -> Node:
    """Return the smallest node under ``root`` that covers ``address``."""
    if address.start < root.start_byte or address.end > root.end_byte:
        raise BadAddress(
            f"Address {address.span_key} is outside the tree span {root.start_byte}:{root.end_byte}"
        )
    node = root.descendant_for_byte_range(address.start, address.end)
    if node is None:
        raise BadAddress(f"No node covers address {address.span_key}")
    return node


def _sibling_index(parent: Node, child: Node) -> int:
    index = 0
    sibling = first_child(parent)
    while sibling is not None and sibling != child:
        sibling = sibling.next_sibling
        index += 1
    return index


def relationship_between(source: Node, target: Node) -> RelationshipPath:
    """Walk up from ``target`` until its ancestor becomes a sibling of ``source``.

    Each level contributes one ``firstChild`` and as many ``nextSibling`` steps
    as the node's index under its parent, prepended so the path reads from the
    top down. When the walk does not end on ``source`` itself (the target lies
    under a sibling of the source, above it, or in an unrelated branch) the
    partial path is returned with ``reachable=False``.
    """
    steps: list[Step] = []
    stop = source.parent
    current = target
    parent = target.parent

    while parent is not None and parent != stop:
        level = [Step.FIRST_CHILD] + [Step.NEXT_SIBLING] * _sibling_index(parent, current)
        steps[:0] = level
        current = parent
        parent = parent.parent

    return RelationshipPath(steps=tuple(steps), reachable=current == source)


def resolve_path(root: Node, source_address: NodeAddress, target_address: NodeAddress) -> RelationshipPath:
    source = resolve_node(root, source_address)
    target = resolve_node(root, target_address)
    return relationship_between(source, target)
