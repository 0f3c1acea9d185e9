"""Shared network fixtures.

Each fixture returns a freshly built FlowNetwork with zero flow, so tests may
run the engine on it in place.
"""

from __future__ import annotations

import pytest

from netflow.model import FlowNetwork


@pytest.fixture
def diamond():
    # Capacity:
    #        [3]      [2]
    #    ┌───────►1───────┐
    #    │        │       ▼
    #    0        │[1]    3
    #    │        ▼       ▲
    #    └───────►2───────┘
    #        [2]      [3]
    return FlowNetwork.from_edges(
        4, [(0, 1, 3), (0, 2, 2), (1, 2, 1), (1, 3, 2), (2, 3, 3)]
    )


@pytest.fixture
def single_edge():
    return FlowNetwork.from_edges(2, [(0, 1, 5)])


@pytest.fixture
def disconnected():
    # 0 -> 1 and 2 -> 3, no route from 0 to 3
    return FlowNetwork.from_edges(4, [(0, 1, 4), (2, 3, 6)])


@pytest.fixture
def clrs():
    # Classic textbook network (s=0, t=5) with maximum flow 23
    return FlowNetwork.from_edges(
        6,
        [
            (0, 1, 16),
            (0, 2, 13),
            (2, 1, 4),
            (1, 3, 12),
            (3, 2, 9),
            (2, 4, 14),
            (4, 3, 7),
            (3, 5, 20),
            (4, 5, 4),
        ],
    )


@pytest.fixture
def antiparallel():
    # The 1 -> 0 edge is added first, so the first 0 -> 1 edge in node 0's
    # adjacency list is its zero-capacity reverse companion.
    return FlowNetwork.from_edges(3, [(1, 0, 5), (0, 1, 4), (1, 2, 3)])
