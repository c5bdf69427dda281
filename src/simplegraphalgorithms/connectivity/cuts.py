"""
Minimum vertex and edge cuts.

Both cut problems are written with a side variable z[v] in {0, 1}: no edge
may join a z=0 vertex to a z=1 vertex unless the cut pays for it (the
edge itself for edge cuts, one of its end points for vertex cuts).
"""
from __future__ import annotations

from typing import Hashable, Optional, Set, Tuple

import networkx as nx

from simplegraphalgorithms.errors import InfeasibleError, InvalidInputError
from simplegraphalgorithms.external.milp import IntegerProgram
from simplegraphalgorithms.utils.graphs import as_simple_graph, edge_list, is_complete, vertex_list

Edge = Tuple[Hashable, Hashable]


def _check_terminals(G: nx.Graph, s: Optional[Hashable], t: Optional[Hashable]) -> bool:
    """Validate s, t; returns True when a terminal pair was given."""
    if s is None and t is None:
        return False
    if s is None or t is None:
        raise InvalidInputError("Give both terminals s and t, or neither")
    for v in (s, t):
        if v not in G:
            raise InvalidInputError(f"{v!r} is not a vertex of this graph")
    if s == t:
        raise InvalidInputError("source and sink cannot be the same")
    return True


def min_edge_cut(
    G: nx.Graph,
    s: Optional[Hashable] = None,
    t: Optional[Hashable] = None,
) -> Set[Edge]:
    """
    A smallest set of edges whose removal disconnects G, or, given s and t,
    separates s from t.
    """
    G = as_simple_graph(G)
    st = _check_terminals(G, s, t)
    VV = vertex_list(G)
    if len(VV) <= 1:
        return set()

    EE = edge_list(G)
    prog = IntegerProgram("min_edge_cut")
    z = prog.add_binary_vars(VV)
    y = prog.add_binary_vars(EE)
    for e in EE:
        u, v = e
        prog.add_constraint({y[e]: 1, z[u]: -1, z[v]: 1}, ">=", 0)
        prog.add_constraint({y[e]: 1, z[u]: 1, z[v]: -1}, ">=", 0)

    if st:
        prog.add_constraint({z[s]: 1}, "==", 0)
        prog.add_constraint({z[t]: 1}, "==", 1)
    else:
        prog.add_constraint({z[v]: 1 for v in VV}, ">=", 1)
        prog.add_constraint({z[v]: 1 for v in VV}, "<=", len(VV) - 1)

    prog.set_objective({i: 1 for i in y.values()}, "min")
    return set(prog.optimum().chosen(y))


def edge_connectivity(
    G: nx.Graph,
    s: Optional[Hashable] = None,
    t: Optional[Hashable] = None,
) -> int:
    """Size of min_edge_cut(G, s, t)."""
    return len(min_edge_cut(G, s, t))


def min_cut(
    G: nx.Graph,
    s: Optional[Hashable] = None,
    t: Optional[Hashable] = None,
) -> Set[Hashable]:
    """
    A smallest set of vertices whose removal disconnects G, or, given
    non-adjacent s and t, separates s from t.

    Raises InfeasibleError for complete graphs, which have no vertex cut.
    """
    G = as_simple_graph(G)
    st = _check_terminals(G, s, t)
    if st and G.has_edge(s, t):
        raise InvalidInputError(f"adjacent vertices {s!r} and {t!r} cannot be separated")
    if not st and is_complete(G):
        raise InfeasibleError("A complete graph has no vertex cut")

    VV = vertex_list(G)
    prog = IntegerProgram("min_cut")
    z = prog.add_binary_vars(VV)
    c = prog.add_binary_vars(VV)
    for u, v in G.edges():
        prog.add_constraint({z[u]: 1, z[v]: -1, c[u]: -1, c[v]: -1}, "<=", 0)
        prog.add_constraint({z[v]: 1, z[u]: -1, c[u]: -1, c[v]: -1}, "<=", 0)

    if st:
        prog.add_constraint({z[s]: 1}, "==", 0)
        prog.add_constraint({z[t]: 1}, "==", 1)
        prog.add_constraint({c[s]: 1}, "==", 0)
        prog.add_constraint({c[t]: 1}, "==", 0)
    else:
        # witnesses: some uncut vertex on each side
        a = prog.add_binary_vars(("a", v) for v in VV)
        b = prog.add_binary_vars(("b", v) for v in VV)
        for v in VV:
            prog.add_constraint({a["a", v]: 1, c[v]: 1}, "<=", 1)
            prog.add_constraint({a["a", v]: 1, z[v]: 1}, "<=", 1)
            prog.add_constraint({b["b", v]: 1, c[v]: 1}, "<=", 1)
            prog.add_constraint({b["b", v]: 1, z[v]: -1}, "<=", 0)
        prog.add_constraint({i: 1 for i in a.values()}, ">=", 1)
        prog.add_constraint({i: 1 for i in b.values()}, ">=", 1)

    prog.set_objective({i: 1 for i in c.values()}, "min")
    return set(prog.optimum().chosen(c))


def connectivity(
    G: nx.Graph,
    s: Optional[Hashable] = None,
    t: Optional[Hashable] = None,
) -> int:
    """
    Vertex connectivity of G (n - 1 for complete graphs), or the size of a
    smallest s-t vertex separator.
    """
    G = as_simple_graph(G)
    if s is None and t is None and is_complete(G):
        return max(G.number_of_nodes() - 1, 0)
    return len(min_cut(G, s, t))
