"""Residual-graph data model: edges and the flow network that owns them."""

from netflow.model.edge import Edge
from netflow.model.network import FlowNetwork

__all__ = ["Edge", "FlowNetwork"]
