"""Breadth-first search over the residual graph.

Edges are admitted only while they have positive residual capacity, so the
search explores exactly the residual graph without materializing it. The
predecessor map records the edge object that discovered each node rather than
just the previous node, which keeps the path unambiguous when parallel or
antiparallel edges exist.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Optional, Set

from netflow.model import Edge, FlowNetwork

# node -> edge that discovered it (None for the search root)
PredMap = Dict[int, Optional[Edge]]


def residual_bfs(
    network: FlowNetwork,
    source: int,
    stop_at: Optional[int] = None,
) -> PredMap:
    """
    Breadth-first search from ``source`` along edges with residual capacity.

    Neighbours are visited in adjacency order. If ``stop_at`` is given the
    search returns as soon as that node is admitted.
    """
    network.validate_node(source, "Source node")
    pred: PredMap = {source: None}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for edge in network.edges_from(node):
            neighbor = edge.destination
            if neighbor in pred or edge.residual_capacity <= 0:
                continue
            pred[neighbor] = edge
            if neighbor == stop_at:
                return pred
            queue.append(neighbor)
    return pred


def find_augmenting_path(
    network: FlowNetwork,
    source: int,
    sink: int,
    stop_at_sink: bool = False,
) -> Optional[PredMap]:
    """Find a fewest-edge augmenting path from ``source`` to ``sink``.

    Args:
        network: Network whose current flows define the residual graph.
        source: Start of the path.
        sink: End of the path.
        stop_at_sink: End the search once the sink is reached. The path found
            is the same either way since BFS admits every node once.

    Returns:
        Predecessor map from which the path can be walked back from ``sink``
        to ``source``, or None when no augmenting path exists. None is the
        normal termination signal of Edmonds-Karp, not an error. A path from
        a node to itself has no edges, so ``source == sink`` yields None.
    """
    network.validate_node(sink, "Sink node")
    if source == sink:
        return None
    pred = residual_bfs(network, source, stop_at=sink if stop_at_sink else None)
    if sink not in pred:
        return None
    return pred


def reachable_nodes(network: FlowNetwork, source: int) -> Set[int]:
    """Nodes reachable from ``source`` in the residual graph."""
    return set(residual_bfs(network, source))
