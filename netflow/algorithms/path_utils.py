"""Turn a breadth-first predecessor map into a concrete augmenting path."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from netflow.algorithms.bfs import PredMap
from netflow.model import Edge


def resolve_edge_path(pred: PredMap, source: int, sink: int) -> List[Edge]:
    """
    Walk a predecessor map back from ``sink`` and return the edges of the
    path in source-to-sink order.

    Raises:
        ValueError: If ``sink`` is not in the map or the chain does not lead
            back to ``source``.
    """
    if sink not in pred:
        raise ValueError(f"Node {sink} was not reached by the search")

    path: List[Edge] = []
    node = sink
    while node != source:
        edge = pred.get(node)
        if edge is None:
            raise ValueError(f"Predecessor chain from {sink} does not reach {source}")
        path.append(edge)
        node = edge.source
    path.reverse()
    return path


def edge_path_nodes(edges: Sequence[Edge]) -> Tuple[int, ...]:
    """Node sequence visited by a non-empty edge path."""
    if not edges:
        return ()
    return (edges[0].source,) + tuple(edge.destination for edge in edges)
