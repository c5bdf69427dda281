"""Tests for the isomorphism-keyed memo table."""
import networkx as nx
import pytest

from simplegraphalgorithms.cache import IsoMemo, Recall
from simplegraphalgorithms.errors import CacheInconsistencyError


def test_store_and_lookup_by_isomorphism_class():
    memo = IsoMemo()
    G = nx.cycle_graph(5)
    assert memo.store(G, "C5")
    H = nx.relabel_nodes(G, {i: f"x{i}" for i in range(5)})
    hit = memo.lookup(H)
    assert hit == Recall(found=True, value="C5")
    miss = memo.lookup(nx.path_graph(5))
    assert not miss.found
    assert miss.value is None


def test_isomorphic_duplicates_are_not_stored():
    memo = IsoMemo()
    assert memo.store(nx.petersen_graph(), 1)
    assert not memo.store(nx.relabel_nodes(nx.petersen_graph(), lambda v: v + 100), 2)
    assert memo.size() == 1
    assert memo.lookup(nx.petersen_graph()).value == 1


def test_collisions_share_a_bucket():
    memo = IsoMemo()
    G = nx.cycle_graph(6)
    H = nx.disjoint_union(nx.cycle_graph(3), nx.cycle_graph(3))
    # force both graphs under one signature
    assert memo.store(G, "hexagon", signature=0)
    assert memo.store(H, "triangles", signature=0)
    assert memo.size() == 2
    assert memo.buckets() == 1
    assert memo.lookup(G, signature=0).value == "hexagon"
    assert memo.lookup(H, signature=0).value == "triangles"


def test_stored_graph_is_a_copy():
    memo = IsoMemo()
    G = nx.path_graph(4)
    memo.store(G, "P4")
    G.add_edge(0, 3)
    assert memo.lookup(nx.path_graph(4)).value == "P4"
    assert not memo.lookup(G).found


def test_size_and_reset():
    memo = IsoMemo()
    for n in range(1, 6):
        memo.store(nx.complete_graph(n), n)
    assert memo.size() == 5
    assert len(memo) == 5
    assert "5 graphs" in repr(memo)
    memo.reset()
    assert memo.size() == 0
    assert not memo.lookup(nx.complete_graph(3)).found


def test_instances_are_independent():
    a = IsoMemo()
    b = IsoMemo()
    a.store(nx.path_graph(3), "a")
    assert not b.lookup(nx.path_graph(3)).found


def test_custom_equivalence():
    calls = []

    def _same_size(G, H):
        calls.append((G, H))
        return G.number_of_nodes() == H.number_of_nodes()

    memo = IsoMemo(equivalent=_same_size)
    memo.store(nx.path_graph(3), "three", signature=7)
    assert memo.lookup(nx.complete_graph(3), signature=7).value == "three"
    assert calls


def test_consistency_check():
    memo = IsoMemo()
    memo.store(nx.path_graph(3), "ok")
    memo.check_consistency()
    memo.store(nx.cycle_graph(4), "misfiled", signature=123)
    with pytest.raises(CacheInconsistencyError):
        memo.check_consistency()
