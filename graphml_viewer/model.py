"""In-memory directed graph holding the nodes and edges read from GraphML."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

Position = tuple[float, float]


@dataclass
class NodeData:
    """A node: its GraphML id, the label shown for it and its layout position."""

    id: str
    label: str
    position: Position = (0.0, 0.0)


@dataclass
class EdgeData:
    """Payload carried by an edge."""

    id: str | None = None


@dataclass(frozen=True)
class Edge:
    """A directed edge between two node indices."""

    source: int
    target: int
    data: EdgeData


class Graph:
    """A directed multigraph whose nodes are addressed by insertion index."""

    def __init__(self) -> None:
        self._nodes: list[NodeData] = []
        self._edges: list[Edge] = []

    def add_node(self, data: NodeData) -> int:
        """Add a node and return its index."""
        self._nodes.append(data)
        return len(self._nodes) - 1

    def add_edge(self, source: int, target: int, data: EdgeData | None = None) -> int:
        """Add a directed edge between existing nodes and return its index."""
        for index in (source, target):
            self._check_index(index)
        self._edges.append(Edge(source, target, data if data is not None else EdgeData()))
        return len(self._edges) - 1

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def node_indices(self) -> range:
        """Indices of all nodes, in insertion order."""
        return range(len(self._nodes))

    @property
    def nodes(self) -> tuple[NodeData, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def __getitem__(self, index: int) -> NodeData:
        self._check_index(index)
        return self._nodes[index]

    def __iter__(self) -> Iterator[NodeData]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"no node with index {index}")