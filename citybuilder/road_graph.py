"""Directed graph of road nodes and the paths that connect them."""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set, Tuple

Node = Tuple[int, int]
Edge = Tuple[Node, Node]
Point = Tuple[float, float, float]
RoadPath = List[Point]
NodeData = List[List[RoadPath]]
EdgeData = RoadPath


def _node(value: Sequence[int]) -> Node:
    x, y = value
    return (int(x), int(y))


def _edge(value: Sequence[Sequence[int]]) -> Edge:
    start, end = value
    return (_node(start), _node(end))


def empty_node_data() -> NodeData:
    """A 4x4 table of empty paths, indexed by entry and exit direction."""
    return [[[] for _ in range(4)] for _ in range(4)]


class RoadGraph:
    """Road nodes keyed by grid cell, with directed edges between them."""

    def __init__(self) -> None:
        self._nodes: Dict[Node, NodeData] = {}
        self._edges: Dict[Edge, EdgeData] = {}

    @property
    def nodes(self) -> Mapping[Node, NodeData]:
        return MappingProxyType(self._nodes)

    @property
    def edges(self) -> Mapping[Edge, EdgeData]:
        return MappingProxyType(self._edges)

    def adjacent(self, x: Sequence[int], y: Sequence[int]) -> bool:
        """Whether there is an edge from ``x`` to ``y``."""
        return (_node(x), _node(y)) in self._edges

    def neighbours(self, x: Sequence[int]) -> Set[Node]:
        """Nodes reachable from ``x`` over one outgoing edge."""
        start = _node(x)
        return {end for (origin, end) in self._edges if origin == start}

    def add_node(self, x: Sequence[int], data: Optional[NodeData] = None) -> bool:
        """Insert or replace a node; True if it was not there before."""
        node = _node(x)
        is_new = node not in self._nodes
        self._nodes[node] = empty_node_data() if data is None else data
        return is_new

    def remove_node(self, x: Sequence[int]) -> bool:
        """Remove a node and the edges to and from its neighbours."""
        node = _node(x)
        for neighbour in self.neighbours(node):
            self.remove_edge((node, neighbour))
            self.remove_edge((neighbour, node))
        return self._nodes.pop(node, None) is not None

    def update_node_data(self, x: Sequence[int], data: NodeData) -> None:
        """Replace the data of an existing node; KeyError if it is unknown."""
        node = _node(x)
        if node not in self._nodes:
            raise KeyError(node)
        self._nodes[node] = data

    def add_edge(
        self, x: Sequence[int], y: Sequence[int], data: Optional[EdgeData] = None
    ) -> bool:
        """Insert or replace an edge; True if it was not there before."""
        start, end = _node(x), _node(y)
        if start not in self._nodes or end not in self._nodes:
            raise ValueError("At least one node is not in the node list")
        edge = (start, end)
        is_new = edge not in self._edges
        self._edges[edge] = [] if data is None else data
        return is_new

    def remove_edge(self, edge: Sequence[Sequence[int]]) -> bool:
        """Remove an edge; True if it existed."""
        return self._edges.pop(_edge(edge), None) is not None

    def update_edge_data(self, edge: Sequence[Sequence[int]], data: EdgeData) -> None:
        """Replace the data of an existing edge; KeyError if it is unknown."""
        key = _edge(edge)
        if key not in self._edges:
            raise KeyError(key)
        self._edges[key] = data

    def clear(self) -> None:
        self._nodes.clear()
        self._edges.clear()