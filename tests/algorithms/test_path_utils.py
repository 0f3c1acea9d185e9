import pytest

from netflow.algorithms.bfs import residual_bfs
from netflow.algorithms.path_utils import edge_path_nodes, resolve_edge_path


def test_resolve_edge_path_orders_source_to_sink(diamond):
    pred = residual_bfs(diamond, 0)
    path = resolve_edge_path(pred, 0, 3)
    assert [(e.source, e.destination) for e in path] == [(0, 1), (1, 3)]
    assert all(not e.is_reverse for e in path)


def test_resolve_edge_path_unreached_sink_raises(disconnected):
    pred = residual_bfs(disconnected, 0)
    with pytest.raises(ValueError, match="not reached"):
        resolve_edge_path(pred, 0, 3)


def test_resolve_edge_path_broken_chain_raises(diamond):
    pred = residual_bfs(diamond, 0)
    # pretend the search started elsewhere
    with pytest.raises(ValueError, match="does not reach"):
        resolve_edge_path(pred, 2, 1)


def test_edge_path_nodes_empty():
    assert edge_path_nodes([]) == ()
