"""Flow network held as per-node adjacency lists of paired residual edges.

The residual graph is not a separate object: each forward edge carries a
zero-capacity reverse companion in the destination's adjacency list, and the
residual capacity of either direction is read straight off the edge.
"""

from __future__ import annotations

import copy
from typing import Iterable, List, Optional, Tuple

from netflow.model.edge import Edge


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful index or capacity
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


class FlowNetwork:
    """Directed capacitated network over nodes ``0..num_nodes-1``.

    The node count is fixed at construction and edges are never removed;
    after building, only edge flows change.

    Preconditions:
        Parallel edges (two ``add_edge`` calls for the same ordered pair) and
        antiparallel edges are accepted. :meth:`find_edge` then returns the
        first match in adjacency order, which is not necessarily the forward
        edge. The max-flow engine does not depend on it: it works with the
        concrete edge objects found by the search and their ``reverse``
        links.
    """

    def __init__(self, num_nodes: int) -> None:
        """Create an empty network.

        Args:
            num_nodes: Number of nodes, at least 1.

        Raises:
            TypeError: If ``num_nodes`` is not an integer.
            ValueError: If ``num_nodes`` is less than 1.
        """
        _require_int("num_nodes", num_nodes)
        if num_nodes < 1:
            raise ValueError(f"A flow network needs at least one node, got {num_nodes}")
        self._num_nodes = num_nodes
        self._adjacency: List[List[Edge]] = [[] for _ in range(num_nodes)]
        self._edges: List[Edge] = []

    @classmethod
    def from_edges(
        cls, num_nodes: int, edges: Iterable[Tuple[int, int, int]]
    ) -> FlowNetwork:
        """Build a network from ``(source, destination, capacity)`` triples."""
        network = cls(num_nodes)
        for source, destination, capacity in edges:
            network.add_edge(source, destination, capacity)
        return network

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @property
    def num_edges(self) -> int:
        """Number of edges added by callers (reverse companions excluded)."""
        return len(self._edges) // 2

    def validate_node(self, node: int, role: str = "Node") -> None:
        """Raise unless ``node`` is a valid index.

        Raises:
            TypeError: If ``node`` is not an integer.
            ValueError: If ``node`` is outside ``[0, num_nodes)``.
        """
        _require_int(role.lower(), node)
        if not 0 <= node < self._num_nodes:
            raise ValueError(
                f"{role} {node} is out of range for a network with {self._num_nodes} nodes"
            )

    def add_edge(self, source: int, destination: int, capacity: int) -> Edge:
        """Add a directed edge and its zero-capacity reverse companion.

        Args:
            source: Tail node.
            destination: Head node.
            capacity: Non-negative integer capacity.

        Returns:
            The forward edge.

        Raises:
            TypeError: If an argument is not an integer.
            ValueError: If a node is out of range or the capacity is negative.
        """
        self.validate_node(source, "Source node")
        self.validate_node(destination, "Destination node")
        _require_int("capacity", capacity)
        if capacity < 0:
            raise ValueError(
                f"Capacity of edge {source} -> {destination} must be non-negative, got {capacity}"
            )

        edge = Edge(source, destination, capacity)
        reverse_edge = Edge(destination, source, 0, is_reverse=True)
        edge.reverse = reverse_edge
        reverse_edge.reverse = edge

        self._adjacency[source].append(edge)
        self._adjacency[destination].append(reverse_edge)
        self._edges.append(edge)
        self._edges.append(reverse_edge)
        return edge

    def edges_from(self, node: int) -> List[Edge]:
        """Edges leaving ``node`` in insertion order, reverse edges included.

        The order decides which of several equally short augmenting paths the
        breadth-first search finds first.
        """
        self.validate_node(node)
        return self._adjacency[node]

    def find_edge(self, u: int, v: int) -> Optional[Edge]:
        """Return the first edge ``u -> v`` in adjacency order, or None."""
        for edge in self.edges_from(u):
            if edge.destination == v:
                return edge
        return None

    def all_edges(self) -> List[Edge]:
        """Every edge, forward and reverse, in insertion order."""
        return self._edges

    def forward_edges(self) -> List[Edge]:
        """Edges added through :meth:`add_edge`, in insertion order."""
        return [edge for edge in self._edges if not edge.is_reverse]

    def reset_flows(self) -> None:
        """Zero the flow on every edge."""
        for edge in self._edges:
            edge.flow = 0

    def copy(self) -> FlowNetwork:
        """Deep copy with flows and edge pairing preserved."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"FlowNetwork(num_nodes={self._num_nodes}, num_edges={self.num_edges})"
