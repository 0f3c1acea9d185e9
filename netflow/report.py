"""Console formatting of networks and max-flow results."""

from __future__ import annotations

from typing import List

from netflow.algorithms.types import MaxFlowResult
from netflow.model import FlowNetwork


def format_network(network: FlowNetwork) -> str:
    """Describe the network node by node, positive-capacity edges only."""
    lines = [f"Network with {network.num_nodes} nodes:"]
    for node in range(network.num_nodes):
        edges = [repr(edge) for edge in network.edges_from(node) if edge.capacity > 0]
        lines.append(f"Node {node} edges: {', '.join(edges)}".rstrip())
    return "\n".join(lines)


def format_flow_assignment(network: FlowNetwork) -> List[str]:
    """One ``f(u,v) = flow / capacity`` line per positive-capacity edge."""
    lines = []
    for node in range(network.num_nodes):
        for edge in network.edges_from(node):
            if edge.capacity > 0:
                lines.append(
                    f"f({edge.source},{edge.destination}) = {edge.flow} / {edge.capacity}"
                )
    return lines


def format_min_cut(result: MaxFlowResult) -> List[str]:
    reachable = ", ".join(str(node) for node in sorted(result.reachable))
    lines = [f"Source side: {{{reachable}}}"]
    for edge in result.min_cut:
        lines.append(f"cut({edge.source},{edge.destination}) capacity {edge.capacity}")
    lines.append(f"Cut capacity: {result.min_cut_capacity}")
    return lines


def format_result(result: MaxFlowResult, *, include_trace: bool = True) -> str:
    """Render the result, the algorithm steps and the minimum cut.

    Args:
        result: Outcome of a max-flow run.
        include_trace: Include the ALGORITHM STEPS section.
    """
    sections = [
        "******RESULTS******",
        f"Maximum flow node {result.source} to node {result.sink}: {result.total_flow}",
        f"Augmenting paths: {result.iterations}",
    ]
    if include_trace:
        sections.append("")
        sections.append("******ALGORITHM STEPS******")
        sections.extend(result.trace)
    sections.append("")
    sections.append("******MINIMUM CUT******")
    sections.extend(format_min_cut(result))
    return "\n".join(sections)
