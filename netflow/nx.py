"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from netflow.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=3)
    >>> G.add_edge("a", "t", capacity=2)
    >>>
    >>> network, node_map = from_networkx(G)
    >>> result = calc_max_flow(network, node_map.to_index["s"], node_map.to_index["t"])
    >>> G_out = to_networkx(network, node_map)  # carries the computed flows
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

from netflow.model import FlowNetwork


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        return cls(
            to_index={name: i for i, name in enumerate(names)},
            to_name={i: name for i, name in enumerate(names)},
        )

    def __len__(self) -> int:
        return len(self.to_index)


def _integral_capacity(value: Any, u: Hashable, v: Hashable) -> int:
    try:
        as_float = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Capacity of edge {u!r} -> {v!r} is not numeric: {value!r}") from None
    if not as_float.is_integer():
        raise ValueError(f"Capacity of edge {u!r} -> {v!r} must be an integer, got {value!r}")
    return int(as_float)


def from_networkx(
    G: Any,
    *,
    capacity_attr: str = "capacity",
    default_capacity: int = 1,
    bidirectional: bool = False,
) -> Tuple[FlowNetwork, NodeMap]:
    """Convert a NetworkX graph into a FlowNetwork.

    Each edge of an undirected graph (Graph, MultiGraph) becomes two directed
    edges of the same capacity, one per direction. Node names are sorted by
    ``str`` so the resulting indices are deterministic.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        capacity_attr: Edge attribute holding the capacity.
        default_capacity: Capacity for edges without ``capacity_attr``.
        bidirectional: Also add the reverse of every edge of a directed
            graph. Always in effect for undirected graphs.

    Returns:
        ``(network, node_map)``.

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If G has no nodes or a capacity is not a non-negative
            integer.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )
    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    network = FlowNetwork(len(node_map))

    both_ways = bidirectional or not G.is_directed()
    for u, v, data in G.edges(data=True):
        capacity = _integral_capacity(data.get(capacity_attr, default_capacity), u, v)
        src_idx, dst_idx = node_map.to_index[u], node_map.to_index[v]
        network.add_edge(src_idx, dst_idx, capacity)
        if both_ways and src_idx != dst_idx:
            network.add_edge(dst_idx, src_idx, capacity)

    return network, node_map


def to_networkx(
    network: FlowNetwork,
    node_map: Optional[NodeMap] = None,
    *,
    include_flow: bool = True,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> nx.MultiDiGraph:
    """Convert a FlowNetwork into a NetworkX MultiDiGraph.

    Only caller-added edges are exported; reverse companions are an artifact
    of the residual representation.

    Args:
        network: Network to convert.
        node_map: Restores original node names when given; otherwise nodes
            are labeled 0, 1, 2, ...
        include_flow: Also set ``flow_attr`` from the current edge flows.
        capacity_attr: Edge attribute name for capacity.
        flow_attr: Edge attribute name for flow.
    """
    def name(idx: int) -> Hashable:
        return node_map.to_name.get(idx, idx) if node_map is not None else idx

    G = nx.MultiDiGraph()
    G.add_nodes_from(name(idx) for idx in range(network.num_nodes))
    for edge in network.forward_edges():
        attrs: Dict[str, int] = {capacity_attr: edge.capacity}
        if include_flow:
            attrs[flow_attr] = edge.flow
        G.add_edge(name(edge.source), name(edge.destination), **attrs)
    return G
