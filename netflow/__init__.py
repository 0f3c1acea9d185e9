"""netflow: maximum flow in capacitated networks.

Implements Edmonds-Karp (Ford-Fulkerson with breadth-first augmenting paths)
over a residual graph kept as adjacency lists of paired edges, and records a
human-readable trace of every iteration.

Example:
    from netflow import FlowNetwork, calc_max_flow

    net = FlowNetwork(4)
    net.add_edge(0, 1, 3)
    net.add_edge(1, 3, 2)
    result = calc_max_flow(net, 0, 3)
    print(result.total_flow)
    print("\\n".join(result.trace))
"""

from __future__ import annotations

from netflow import cli, logging
from netflow._version import __version__
from netflow.algorithms import (
    Augmentation,
    EdgeFlow,
    MaxFlowEngine,
    MaxFlowResult,
    calc_max_flow,
    find_augmenting_path,
)
from netflow.config import MAX_FLOW_CONFIG, MaxFlowConfig
from netflow.io import (
    NetworkDocument,
    NetworkFormatError,
    load_network_document,
    load_network_yaml,
    parse_network,
    parse_network_file,
)
from netflow.model import Edge, FlowNetwork
from netflow.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Model
    "Edge",
    "FlowNetwork",
    # Algorithms
    "MaxFlowEngine",
    "calc_max_flow",
    "find_augmenting_path",
    # Results
    "Augmentation",
    "EdgeFlow",
    "MaxFlowResult",
    # Configuration
    "MaxFlowConfig",
    "MAX_FLOW_CONFIG",
    # Input
    "NetworkDocument",
    "NetworkFormatError",
    "load_network_document",
    "load_network_yaml",
    "parse_network",
    "parse_network_file",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
