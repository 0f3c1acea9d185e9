"""Result containers for max-flow runs.

Frozen dataclasses so a finished run cannot be altered by the caller; each
exposes ``to_dict()`` returning JSON-safe primitives for the CLI export.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, FrozenSet, Tuple

from netflow.model import Edge


@dataclass(frozen=True)
class Augmentation:
    """One iteration of the augmenting-path loop.

    Attributes:
        iteration: 1-based iteration number.
        path: Nodes of the augmenting path from source to sink.
        bottleneck: Flow added along the path.
        total_flow: Flow accumulated by the run after this iteration.
    """

    iteration: int
    path: Tuple[int, ...]
    bottleneck: int
    total_flow: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["path"] = list(self.path)
        return data


@dataclass(frozen=True)
class EdgeFlow:
    """Snapshot of flow on one edge."""

    source: int
    destination: int
    flow: int
    capacity: int

    @classmethod
    def from_edge(cls, edge: Edge) -> EdgeFlow:
        return cls(edge.source, edge.destination, edge.flow, edge.capacity)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MaxFlowResult:
    """Outcome of :meth:`MaxFlowEngine.find_max_flow`.

    Attributes:
        source: Source node of the run.
        sink: Sink node of the run.
        total_flow: Flow added by this run. On a network that starts with
            zero flow this is the maximum flow value.
        augmentations: Per-iteration records in order.
        trace: Human-readable description of the run, one line per entry.
        edge_flows: Final flow on every positive-capacity edge, in insertion
            order.
        reachable: Nodes reachable from the source in the final residual
            graph.
        min_cut: Positive-capacity forward edges leaving ``reachable``. Their
            capacities sum to the flow the network carries from source to
            sink.
    """

    source: int
    sink: int
    total_flow: int
    augmentations: Tuple[Augmentation, ...]
    trace: Tuple[str, ...]
    edge_flows: Tuple[EdgeFlow, ...]
    reachable: FrozenSet[int]
    min_cut: Tuple[EdgeFlow, ...]

    @property
    def iterations(self) -> int:
        """Number of augmenting paths applied."""
        return len(self.augmentations)

    @property
    def min_cut_capacity(self) -> int:
        return sum(edge.capacity for edge in self.min_cut)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "source": self.source,
            "sink": self.sink,
            "total_flow": self.total_flow,
            "iterations": self.iterations,
            "augmentations": [a.to_dict() for a in self.augmentations],
            "edge_flows": [e.to_dict() for e in self.edge_flows],
            "reachable": sorted(self.reachable),
            "min_cut": [e.to_dict() for e in self.min_cut],
            "min_cut_capacity": self.min_cut_capacity,
            "trace": list(self.trace),
        }
