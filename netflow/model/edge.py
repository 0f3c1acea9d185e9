"""Directed edge of a flow network with its paired residual companion.

Every edge added by :meth:`FlowNetwork.add_edge` comes with a reverse edge of
capacity zero. The two reference each other through ``reverse`` and their
flows are kept as negations of each other: pushing ``d`` units along
``u -> v`` makes ``d`` units available to be returned along ``v -> u``.
"""

from __future__ import annotations

from typing import Optional


class Edge:
    """One arc of the residual graph.

    Attributes:
        flow: Current flow. Negative on reverse edges that carry returnable
            flow.
        is_reverse: True for the synthetic zero-capacity companion edge.
        reverse: The paired edge in the opposite direction.
    """

    __slots__ = ("_source", "_destination", "_capacity", "flow", "is_reverse", "reverse")

    def __init__(
        self,
        source: int,
        destination: int,
        capacity: int,
        *,
        is_reverse: bool = False,
    ) -> None:
        self._source = source
        self._destination = destination
        self._capacity = capacity
        self.flow = 0
        self.is_reverse = is_reverse
        self.reverse: Optional[Edge] = None

    @property
    def source(self) -> int:
        return self._source

    @property
    def destination(self) -> int:
        return self._destination

    @property
    def capacity(self) -> int:
        """Capacity fixed at construction."""
        return self._capacity

    @property
    def residual_capacity(self) -> int:
        """How much more flow can be pushed along this edge."""
        return self._capacity - self.flow

    def augment(self, amount: int) -> None:
        """Push ``amount`` units along this edge.

        The paired edge loses the same amount so that
        ``flow(u -> v) == -flow(v -> u)`` holds after the call.

        Raises:
            RuntimeError: If the edge was never paired.
        """
        if self.reverse is None:
            raise RuntimeError(f"{self} has no paired reverse edge")
        self.flow += amount
        self.reverse.flow -= amount

    def __repr__(self) -> str:
        return f"Edge({self._source} -> {self._destination}, flow={self.flow}/{self._capacity})"
