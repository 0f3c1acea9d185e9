"""Augmenting-path search and the Edmonds-Karp max-flow engine."""

from netflow.algorithms.bfs import find_augmenting_path, reachable_nodes, residual_bfs
from netflow.algorithms.max_flow import MaxFlowEngine, calc_max_flow
from netflow.algorithms.types import Augmentation, EdgeFlow, MaxFlowResult

__all__ = [
    "Augmentation",
    "EdgeFlow",
    "MaxFlowEngine",
    "MaxFlowResult",
    "calc_max_flow",
    "find_augmenting_path",
    "reachable_nodes",
    "residual_bfs",
]
