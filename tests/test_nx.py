import networkx as nx
import pytest

from netflow.algorithms.max_flow import calc_max_flow
from netflow.model import FlowNetwork
from netflow.nx import NodeMap, from_networkx, to_networkx


def test_node_map_from_names():
    node_map = NodeMap.from_names(["a", "b", "c"])
    assert node_map.to_index["b"] == 1
    assert node_map.to_name[2] == "c"
    assert len(node_map) == 3


def test_from_networkx_digraph():
    G = nx.DiGraph()
    G.add_edge("s", "a", capacity=3)
    G.add_edge("a", "t", capacity=2)
    G.add_edge("s", "t")  # default capacity

    network, node_map = from_networkx(G)
    assert network.num_nodes == 3
    assert sorted(node_map.to_index) == ["a", "s", "t"]

    s, t = node_map.to_index["s"], node_map.to_index["t"]
    assert calc_max_flow(network, s, t).total_flow == 3


def test_from_networkx_multidigraph_keeps_parallel_edges():
    G = nx.MultiDiGraph()
    G.add_edge(0, 1, capacity=2)
    G.add_edge(0, 1, capacity=5)
    network, _ = from_networkx(G)
    assert network.num_edges == 2
    assert calc_max_flow(network, 0, 1).total_flow == 7


@pytest.mark.parametrize("graph_cls", [nx.Graph, nx.MultiGraph])
def test_from_networkx_undirected_edges_carry_flow_both_ways(graph_cls):
    G = graph_cls()
    G.add_edge("t", "s", capacity=3)
    G.add_edge("s", "a", capacity=2)
    G.add_edge("a", "t", capacity=4)

    network, node_map = from_networkx(G)
    assert network.num_edges == 6
    s, t = node_map.to_index["s"], node_map.to_index["t"]
    assert calc_max_flow(network, s, t, copy_network=True).total_flow == 5
    assert calc_max_flow(network, t, s).total_flow == 5


def test_from_networkx_undirected_matches_networkx_reference():
    G = nx.Graph()
    G.add_edge("t", "b", capacity=2)
    G.add_edge("b", "s", capacity=7)
    G.add_edge("t", "s", capacity=3)
    G.add_edge("b", "a", capacity=1)
    G.add_edge("a", "s", capacity=1)

    network, node_map = from_networkx(G)
    s, t = node_map.to_index["s"], node_map.to_index["t"]
    assert calc_max_flow(network, s, t).total_flow == nx.maximum_flow_value(G, "s", "t")


def test_from_networkx_bidirectional_directed_graph():
    G = nx.DiGraph()
    G.add_edge("t", "s", capacity=3)

    network, node_map = from_networkx(G)
    s, t = node_map.to_index["s"], node_map.to_index["t"]
    assert calc_max_flow(network, s, t, copy_network=True).total_flow == 0

    network, node_map = from_networkx(G, bidirectional=True)
    assert network.num_edges == 2
    assert calc_max_flow(network, s, t).total_flow == 3


def test_from_networkx_undirected_self_loop_added_once():
    G = nx.Graph()
    G.add_edge("a", "a", capacity=1)
    network, _ = from_networkx(G)
    assert network.num_edges == 1


def test_from_networkx_accepts_integral_floats():
    G = nx.DiGraph()
    G.add_edge("x", "y", capacity=4.0)
    network, _ = from_networkx(G)
    assert network.forward_edges()[0].capacity == 4


@pytest.mark.parametrize("capacity", [2.5, "many"])
def test_from_networkx_rejects_non_integral_capacity(capacity):
    G = nx.DiGraph()
    G.add_edge("x", "y", capacity=capacity)
    with pytest.raises(ValueError):
        from_networkx(G)


def test_from_networkx_rejects_bad_input():
    with pytest.raises(TypeError):
        from_networkx({"a": ["b"]})
    with pytest.raises(ValueError, match="no nodes"):
        from_networkx(nx.DiGraph())


def test_to_networkx_exports_forward_edges_with_flow(diamond):
    calc_max_flow(diamond, 0, 3)
    G = to_networkx(diamond)
    assert isinstance(G, nx.MultiDiGraph)
    assert G.number_of_nodes() == 4
    assert G.number_of_edges() == 5
    flows = {(u, v): d["flow"] for u, v, d in G.edges(data=True)}
    assert flows == {(0, 1): 3, (0, 2): 2, (1, 2): 1, (1, 3): 2, (2, 3): 3}


def test_to_networkx_restores_names_without_flow():
    G = nx.DiGraph()
    G.add_edge("s", "t", capacity=9)
    network, node_map = from_networkx(G)

    G_out = to_networkx(network, node_map, include_flow=False)
    assert set(G_out.nodes()) == {"s", "t"}
    ((u, v, data),) = G_out.edges(data=True)
    assert (u, v) == ("s", "t")
    assert data == {"capacity": 9}


def test_round_trip_matches_networkx_reference(clrs):
    G = nx.DiGraph(to_networkx(clrs, include_flow=False))
    assert nx.maximum_flow_value(G, 0, 5) == calc_max_flow(clrs, 0, 5).total_flow


def test_isolated_nodes_survive_export():
    network = FlowNetwork(3)
    assert set(to_networkx(network).nodes()) == {0, 1, 2}
