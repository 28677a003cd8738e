"""Rendering surface contract and an in-memory implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, TypeVar

NodeT = TypeVar("NodeT")


class Surface(Protocol[NodeT]):
    """The operations the client needs from whatever displays the grid."""

    def create_node(self) -> NodeT: ...

    def append_row(self, nodes: list[NodeT]) -> None: ...

    def remove_rows(self) -> None: ...

    def get_attribute(self, node: NodeT, key: str) -> str | None: ...

    def set_attribute(self, node: NodeT, key: str, value: str | None) -> None:
        """Write ``value`` under ``key``; None removes the attribute."""
        ...

    def get_text(self, node: NodeT) -> str: ...

    def set_text(self, node: NodeT, text: str) -> None: ...

    def locate(self, node: NodeT) -> tuple[int, int] | None:
        """Return the (row, col) of ``node``, or None if it is not on the surface."""
        ...


@dataclass(eq=False, slots=True)
class MemoryNode:
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""


class MemorySurface:
    """A headless table of nodes, used by the HTTP bridge and in tests."""

    def __init__(self) -> None:
        self.rows: list[list[MemoryNode]] = []

    def create_node(self) -> MemoryNode:
        return MemoryNode()

    def append_row(self, nodes: list[MemoryNode]) -> None:
        self.rows.append(list(nodes))

    def remove_rows(self) -> None:
        self.rows = []

    def get_attribute(self, node: MemoryNode, key: str) -> str | None:
        return node.attributes.get(key)

    def set_attribute(self, node: MemoryNode, key: str, value: str | None) -> None:
        if value is None:
            node.attributes.pop(key, None)
        else:
            node.attributes[key] = value

    def get_text(self, node: MemoryNode) -> str:
        return node.text

    def set_text(self, node: MemoryNode, text: str) -> None:
        node.text = text

    def locate(self, node: MemoryNode) -> tuple[int, int] | None:
        for row, nodes in enumerate(self.rows):
            for col, candidate in enumerate(nodes):
                if candidate is node:
                    return row, col
        return None

    def node_at(self, row: int, col: int) -> MemoryNode:
        return self.rows[row][col]
