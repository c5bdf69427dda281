"""Tests for vertex/edge cuts and maximum average degree."""
import networkx as nx
import pytest

from simplegraphalgorithms.connectivity import connectivity, edge_connectivity, min_cut, min_edge_cut
from simplegraphalgorithms.density import ad, mad, mad_core
from simplegraphalgorithms.errors import InfeasibleError, InvalidInputError


# --- cuts ---

def test_petersen_connectivity():
    G = nx.petersen_graph()
    assert connectivity(G) == 3
    assert edge_connectivity(G) == 3
    S = min_cut(G)
    H = G.copy()
    H.remove_nodes_from(S)
    assert not nx.is_connected(H)


def test_path_cut_vertex():
    G = nx.path_graph(4)
    S = min_cut(G)
    assert S in ({1}, {2})
    assert min_edge_cut(G).pop() in set(G.edges())


def test_terminal_cuts():
    G = nx.cycle_graph(6)
    assert connectivity(G, 0, 3) == 2
    assert edge_connectivity(G, 0, 3) == 2
    cut = min_edge_cut(G, 0, 1)
    H = G.copy()
    H.remove_edges_from(cut)
    assert not nx.has_path(H, 0, 1)


def test_complete_graph():
    G = nx.complete_graph(5)
    assert connectivity(G) == 4
    assert edge_connectivity(G) == 4
    with pytest.raises(InfeasibleError):
        min_cut(G)


def test_disconnected_graph():
    G = nx.disjoint_union(nx.cycle_graph(3), nx.cycle_graph(4))
    assert connectivity(G) == 0
    assert edge_connectivity(G) == 0


def test_bad_terminals():
    G = nx.cycle_graph(6)
    with pytest.raises(InvalidInputError):
        min_cut(G, 0, 1)
    with pytest.raises(InvalidInputError):
        min_cut(G, 2, 2)
    with pytest.raises(InvalidInputError):
        min_edge_cut(G, 0, 99)
    with pytest.raises(InvalidInputError):
        connectivity(G, 0)


# --- maximum average degree ---

def test_average_degree():
    assert ad(nx.path_graph(3)) == pytest.approx(4 / 3)
    with pytest.raises(InvalidInputError):
        ad(nx.Graph())


def test_mad_regular_graphs():
    assert mad(nx.petersen_graph()) == pytest.approx(3.0)
    assert mad(nx.cycle_graph(7)) == pytest.approx(2.0)
    assert mad(nx.empty_graph(3)) == 0.0


def test_mad_core_finds_dense_part():
    G = nx.complete_graph(4)
    G.add_edges_from([(3, 4), (4, 5), (5, 6)])
    assert mad(G) == pytest.approx(3.0)
    H = mad_core(G)
    assert set(H.nodes()) == {0, 1, 2, 3}
    assert ad(H) == pytest.approx(mad(G))
    # the argument is left alone
    assert G.number_of_nodes() == 7


def test_mad_of_tree():
    T = nx.balanced_tree(2, 3)
    n = T.number_of_nodes()
    assert mad(T) == pytest.approx(2 * (n - 1) / n)
