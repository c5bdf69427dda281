"""Tests for chromatic_poly and its memoization."""
import networkx as nx
import pytest
import sympy

from simplegraphalgorithms.cache import IsoMemo
import simplegraphalgorithms.coloring.polynomial as cp
from simplegraphalgorithms.coloring import chromatic_poly

x = cp.x


def _poly(expr):
    return sympy.Poly(expr, x)


def _count_expansions(monkeypatch):
    calls = []
    original = cp._deletion_contraction

    def counting(G, memo):
        calls.append(G.number_of_nodes())
        return original(G, memo)

    monkeypatch.setattr(cp, "_deletion_contraction", counting)
    return calls


# --- known polynomials ---

def test_five_cycle():
    expected = _poly(x**5 - 5 * x**4 + 10 * x**3 - 10 * x**2 + 4 * x)
    assert chromatic_poly(nx.cycle_graph(5)) == expected


def test_closed_forms():
    assert chromatic_poly(nx.Graph()) == _poly(1)
    assert chromatic_poly(nx.empty_graph(3)) == _poly(x**3)
    assert chromatic_poly(nx.complete_graph(4)) == _poly(x * (x - 1) * (x - 2) * (x - 3))
    assert chromatic_poly(nx.path_graph(5)) == _poly(x * (x - 1) ** 4)


def test_disconnected_graph_is_a_product():
    G = nx.disjoint_union(nx.complete_graph(3), nx.path_graph(2))
    assert chromatic_poly(G) == _poly(x * (x - 1) * (x - 2) * x * (x - 1))


@pytest.mark.parametrize(
    "G",
    [
        nx.wheel_graph(5),
        nx.cycle_graph(6),
        nx.lollipop_graph(4, 2),
        nx.complete_bipartite_graph(2, 3),
        nx.Graph([(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)]),
    ],
)
def test_matches_networkx(G):
    expected = _poly(nx.chromatic_polynomial(G))
    assert chromatic_poly(G) == expected


def test_prism_values():
    P = chromatic_poly(nx.circular_ladder_graph(3))
    assert P.degree() == 6
    assert P.eval(2) == 0
    assert P.eval(3) == 12
    # leading coefficients: 1, -|E|
    coeffs = P.all_coeffs()
    assert coeffs[0] == 1
    assert coeffs[1] == -9


def test_directed_input():
    D = nx.DiGraph([(0, 1), (1, 2), (2, 3), (3, 0)])
    assert chromatic_poly(D) == chromatic_poly(nx.cycle_graph(4))


# --- memoization ---

def test_shared_memo_skips_recursion(monkeypatch):
    calls = _count_expansions(monkeypatch)
    memo = IsoMemo()
    G = nx.cycle_graph(5)

    first = chromatic_poly(G, memo)
    assert len(calls) > 0
    assert memo.size() > 0

    calls.clear()
    second = chromatic_poly(nx.relabel_nodes(G, lambda v: (v * 2) % 5), memo)
    assert calls == []
    assert second is first


def test_fresh_memo_per_call(monkeypatch):
    calls = _count_expansions(monkeypatch)
    chromatic_poly(nx.cycle_graph(5))
    n_first = len(calls)
    chromatic_poly(nx.cycle_graph(5))
    assert len(calls) == 2 * n_first


def test_memo_reset_forces_recompute(monkeypatch):
    calls = _count_expansions(monkeypatch)
    memo = IsoMemo()
    chromatic_poly(nx.cycle_graph(5), memo)
    memo.reset()
    calls.clear()
    chromatic_poly(nx.cycle_graph(5), memo)
    assert calls
