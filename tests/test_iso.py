"""Tests for exact isomorphism: iso, iso2, iso_matrix, is_iso and iso_check."""
import itertools
import random

import networkx as nx
import numpy as np
import pytest

from simplegraphalgorithms.errors import InvalidInputError, NotIsomorphicError, SolverError
from simplegraphalgorithms.external.milp import IntegerProgram
from simplegraphalgorithms.isomorphism import iso, iso2, iso_check, iso_matrix, is_iso
from simplegraphalgorithms.utils.graphs import adjacency_array, as_simple_graph


def _relabel(G, seed=0, prefix=None):
    nodes = list(G.nodes())
    perm = nodes[:]
    random.Random(seed).shuffle(perm)
    if prefix is not None:
        perm = [f"{prefix}{p}" for p in perm]
    return nx.relabel_nodes(G, dict(zip(nodes, perm)))


def _brute_force_iso(G, H):
    if G.number_of_nodes() != H.number_of_nodes() or G.number_of_edges() != H.number_of_edges():
        return False
    VG = list(G.nodes())
    for perm in itertools.permutations(H.nodes()):
        d = dict(zip(VG, perm))
        if all(H.has_edge(d[u], d[v]) for u, v in G.edges()):
            return True
    return False


def _assert_bijective_iso(G, H, d):
    assert len(d) == G.number_of_nodes()
    assert set(d) == set(G.nodes())
    assert set(d.values()) == set(H.nodes())
    for u, v in G.edges():
        assert H.has_edge(d[u], d[v])


def _kneser_5_2():
    K = nx.Graph()
    pairs = [frozenset(p) for p in itertools.combinations(range(5), 2)]
    K.add_nodes_from(pairs)
    for a, b in itertools.combinations(pairs, 2):
        if not a & b:
            K.add_edge(a, b)
    return K


# --- known isomorphic pairs ---

def test_paley_17_is_self_complementary():
    G = as_simple_graph(nx.paley_graph(17))
    H = nx.complement(G)
    d = iso(G, H)
    assert len(d) == 17
    assert iso_check(G, H, d)


def test_kneser_is_complement_of_line_graph():
    K = _kneser_5_2()
    H = nx.complement(nx.line_graph(nx.complete_graph(5)))
    d = iso(K, H)
    _assert_bijective_iso(K, H, d)
    assert iso_check(K, H, d)


def test_petersen_relabeled_with_strings():
    G = nx.petersen_graph()
    H = _relabel(G, seed=3, prefix="v")
    d = iso(G, H)
    _assert_bijective_iso(G, H, d)


def test_directed_input_is_normalized():
    D = nx.DiGraph(nx.cycle_graph(5))
    assert is_iso(D, nx.cycle_graph(5))


def test_empty_graphs():
    assert iso(nx.Graph(), nx.Graph()) == {}
    assert iso2(nx.Graph(), nx.Graph()) == {}


# --- rejections ---

def test_degree_sequence_rejection_skips_solver(monkeypatch):
    def _fail(self, options=None):
        raise AssertionError("solver should not be called")

    monkeypatch.setattr(IntegerProgram, "solve", _fail)
    # C4 and the paw: same counts, different degrees
    G = nx.cycle_graph(4)
    H = nx.Graph([(0, 1), (0, 2), (0, 3), (1, 2)])
    with pytest.raises(NotIsomorphicError):
        iso(G, H)
    with pytest.raises(NotIsomorphicError):
        iso2(G, H)
    assert not is_iso(G, H)


def test_signature_rejection_skips_solver(monkeypatch):
    def _fail(self, options=None):
        raise AssertionError("solver should not be called")

    monkeypatch.setattr(IntegerProgram, "solve", _fail)
    G = nx.cycle_graph(6)
    H = nx.disjoint_union(nx.cycle_graph(3), nx.cycle_graph(3))
    with pytest.raises(NotIsomorphicError):
        iso(G, H)


def test_iso2_rejects_via_solver():
    G = nx.cycle_graph(6)
    H = nx.disjoint_union(nx.cycle_graph(3), nx.cycle_graph(3))
    with pytest.raises(NotIsomorphicError):
        iso2(G, H)


def test_petersen_minus_edge():
    G = nx.petersen_graph()
    H = G.copy()
    H.remove_edge(0, 1)
    assert not is_iso(G, H)


def test_solver_error_propagates(monkeypatch):
    def _broken(self, options=None):
        raise SolverError("time limit reached", status=1)

    monkeypatch.setattr(IntegerProgram, "solve", _broken)
    G = nx.cycle_graph(5)
    with pytest.raises(SolverError):
        is_iso(G, _relabel(G, seed=1))


# --- algebraic properties ---

def test_reflexive_and_symmetric():
    G = nx.Graph([(0, 1), (1, 2), (2, 3), (3, 0), (0, 4)])
    H = _relabel(G, seed=7, prefix="h")
    assert is_iso(G, G)
    assert is_iso(G, H)
    assert is_iso(H, G)
    d = iso(H, G)
    assert iso_check(H, G, d)


def test_agrees_with_brute_force_on_small_graphs():
    small = [G for G in nx.graph_atlas_g() if G.number_of_nodes() == 4]
    relabeled = [_relabel(G, seed=i) for i, G in enumerate(small)]
    for G, H in itertools.product(small, relabeled):
        expected = _brute_force_iso(G, H)
        assert is_iso(G, H) == expected
        if expected:
            d = iso2(G, H)
            assert iso_check(G, H, d)


def _decides(find, G, H):
    try:
        d = find(G, H)
    except NotIsomorphicError:
        return False
    assert iso_check(G, H, d)
    return True


def test_solver_agrees_with_brute_force_on_six_vertices():
    # only pairs that pass the degree-sequence check reach the solver
    groups = {}
    for G in nx.graph_atlas_g():
        if G.number_of_nodes() == 6:
            key = (G.number_of_edges(), tuple(sorted(d for _, d in G.degree())))
            groups.setdefault(key, []).append(G)

    n_pairs = 0
    for members in groups.values():
        for i, (G, H) in enumerate(itertools.combinations(members, 2)):
            H = _relabel(H, seed=i)
            expected = _brute_force_iso(G, H)
            assert _decides(iso, G, H) == expected
            assert _decides(iso2, G, H) == expected
            n_pairs += 1
    assert n_pairs > 0


def test_refinement_does_not_change_answers():
    for i, G in enumerate(g for g in nx.graph_atlas_g() if g.number_of_nodes() == 5):
        H = _relabel(G, seed=i)
        assert iso_check(G, H, iso(G, H, refine=False))
        assert iso_check(G, H, iso(G, H, refine=True))


# --- iso_matrix and iso_check ---

def test_iso_matrix_conjugates_adjacency():
    G = nx.petersen_graph()
    H = _relabel(G, seed=11)
    P = iso_matrix(G, H)
    assert P.shape == (10, 10)
    assert np.all(P.sum(axis=0) == 1)
    assert np.all(P.sum(axis=1) == 1)
    A = adjacency_array(G)
    B = adjacency_array(H)
    assert np.array_equal(A @ P, P @ B)


def test_iso_check_rejects_bad_maps():
    G = nx.path_graph(3)
    assert iso_check(G, G, {0: 0, 1: 1, 2: 2})
    assert iso_check(G, G, {0: 2, 1: 1, 2: 0})
    assert not iso_check(G, G, {0: 1, 1: 0, 2: 2})
    assert not iso_check(G, G, {0: 0, 1: 0, 2: 2})


def test_iso_check_malformed_maps():
    G = nx.path_graph(3)
    with pytest.raises(InvalidInputError):
        iso_check(G, G, {0: 0, 1: 1})
    with pytest.raises(InvalidInputError):
        iso_check(G, G, {0: 0, 1: 1, 5: 2})
    with pytest.raises(InvalidInputError):
        iso_check(G, G, {0: 0, 1: 1, 2: 9})
    with pytest.raises(InvalidInputError):
        iso_check(G, G, [(0, 0), (1, 1), (2, 2)])


def test_is_iso_with_mapping():
    G = nx.cycle_graph(4)
    assert is_iso(G, G, {0: 1, 1: 2, 2: 3, 3: 0})
    assert not is_iso(G, G, {0: 0, 1: 2, 2: 1, 3: 3})
