"""Maximum flow via Edmonds-Karp augmentation.

Repeatedly finds a fewest-edge augmenting path with breadth-first search,
pushes the path's bottleneck along it, and records every iteration in a
human-readable trace. The trace is owned by a single run and returned with its
result, so independent runs never share state.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from netflow.algorithms.bfs import find_augmenting_path, reachable_nodes
from netflow.algorithms.path_utils import edge_path_nodes, resolve_edge_path
from netflow.algorithms.types import Augmentation, EdgeFlow, MaxFlowResult
from netflow.config import MAX_FLOW_CONFIG, MaxFlowConfig
from netflow.logging import get_logger
from netflow.model import FlowNetwork

logger = get_logger(__name__)


def format_path(nodes: Iterable[int]) -> str:
    return " -> ".join(str(node) for node in nodes)


def flow_state_lines(network: FlowNetwork) -> List[str]:
    """Trace lines dumping flow/capacity of every positive-capacity edge."""
    lines = ["Current flow state:"]
    for edge in network.all_edges():
        if edge.capacity > 0:
            lines.append(
                f" Edge {edge.source} -> {edge.destination}: Flow = {edge.flow}/{edge.capacity}"
            )
    return lines


class MaxFlowEngine:
    """Runs Edmonds-Karp on a network it owns for the duration of a call.

    The network's edge flows are mutated in place. Augmentations are not
    rolled back if a run is interrupted.
    """

    def __init__(
        self, network: FlowNetwork, config: Optional[MaxFlowConfig] = None
    ) -> None:
        self.network = network
        self.config = config if config is not None else MAX_FLOW_CONFIG

    def find_max_flow(self, source: int, sink: int) -> MaxFlowResult:
        """Augment flow from ``source`` to ``sink`` until no path remains.

        Args:
            source: Source node index.
            sink: Sink node index.

        Returns:
            MaxFlowResult with the flow added by this run, the per-iteration
            records, the trace, the final edge flows and the minimum cut.

        Raises:
            TypeError: If a terminal is not an integer.
            ValueError: If a terminal is out of range.
        """
        network = self.network
        try:
            network.validate_node(source, "Source node")
            network.validate_node(sink, "Sink node")
        except (TypeError, ValueError) as exc:
            logger.error("Invalid max-flow terminals: %s", exc)
            raise

        logger.info(
            "Computing max flow from node %d to node %d (%d nodes, %d edges)",
            source,
            sink,
            network.num_nodes,
            network.num_edges,
        )

        trace: List[str] = [
            f"Starting Ford-Fulkerson (Edmonds-Karp) from node {source} to node {sink}"
        ]
        self._record_flow_state(trace)

        augmentations: List[Augmentation] = []
        total_flow = 0

        if source == sink:
            trace.append("Source and sink are the same node; no augmenting path exists")
        else:
            while True:
                pred = find_augmenting_path(
                    network, source, sink, stop_at_sink=self.config.stop_at_sink
                )
                if pred is None:
                    break

                path = resolve_edge_path(pred, source, sink)
                bottleneck = min(edge.residual_capacity for edge in path)
                for edge in path:
                    edge.augment(bottleneck)
                total_flow += bottleneck

                step = Augmentation(
                    iteration=len(augmentations) + 1,
                    path=edge_path_nodes(path),
                    bottleneck=bottleneck,
                    total_flow=total_flow,
                )
                augmentations.append(step)
                logger.debug(
                    "Iteration %d: path %s, bottleneck %d, flow %d",
                    step.iteration,
                    format_path(step.path),
                    bottleneck,
                    total_flow,
                )

                trace.append(f"Iteration {step.iteration}:")
                trace.append(f"Found augmenting path: {format_path(step.path)}")
                trace.append(f"Bottleneck capacity: {bottleneck}")
                trace.append(f"Flow after this iteration: {total_flow}")
                self._record_flow_state(trace)

        trace.append(f"Final maximum flow: {total_flow}")
        trace.append("No more augmenting paths found. Algorithm terminates")

        reachable = reachable_nodes(network, source)
        min_cut = tuple(
            EdgeFlow.from_edge(edge)
            for edge in network.forward_edges()
            if edge.capacity > 0
            and edge.source in reachable
            and edge.destination not in reachable
        )
        edge_flows = tuple(
            EdgeFlow.from_edge(edge) for edge in network.all_edges() if edge.capacity > 0
        )

        logger.info(
            "Max flow from node %d to node %d: %d after %d augmenting paths",
            source,
            sink,
            total_flow,
            len(augmentations),
        )
        return MaxFlowResult(
            source=source,
            sink=sink,
            total_flow=total_flow,
            augmentations=tuple(augmentations),
            trace=tuple(trace),
            edge_flows=edge_flows,
            reachable=frozenset(reachable),
            min_cut=min_cut,
        )

    def _record_flow_state(self, trace: List[str]) -> None:
        if self.config.record_flow_state:
            trace.extend(flow_state_lines(self.network))


def calc_max_flow(
    network: FlowNetwork,
    source: int,
    sink: int,
    *,
    copy_network: bool = False,
    config: Optional[MaxFlowConfig] = None,
) -> MaxFlowResult:
    """Compute the maximum flow between two nodes.

    Args:
        network: Network to run on. Its flows are updated in place unless
            ``copy_network`` is True.
        source: Source node index.
        sink: Sink node index.
        copy_network: Run on a deep copy and leave ``network`` untouched.
        config: Engine configuration; defaults to ``MAX_FLOW_CONFIG``.

    Returns:
        MaxFlowResult of the run.

    Examples:
        >>> net = FlowNetwork.from_edges(2, [(0, 1, 5)])
        >>> calc_max_flow(net, 0, 1).total_flow
        5
    """
    if copy_network:
        network = network.copy()
    return MaxFlowEngine(network, config).find_max_flow(source, sink)
