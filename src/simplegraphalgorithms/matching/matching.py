from __future__ import annotations

from fractions import Fraction
from typing import Dict, Hashable, Set, Tuple

import networkx as nx

from simplegraphalgorithms.errors import InvalidInputError, NoFactorError
from simplegraphalgorithms.external.milp import INTEGER, IntegerProgram
from simplegraphalgorithms.utils.graphs import as_simple_graph, edge_list, incident_edges

Edge = Tuple[Hashable, Hashable]


def max_matching(G: nx.Graph) -> Set[Edge]:
    """A maximum size matching of G, as a set of edges."""
    G = as_simple_graph(G)
    EE = edge_list(G)
    if not EE:
        return set()

    prog = IntegerProgram("max_matching")
    y = prog.add_binary_vars(EE)
    for v, star in incident_edges(G, EE).items():
        if star:
            prog.add_constraint({y[e]: 1 for e in star}, "<=", 1)
    prog.set_objective({i: 1 for i in y.values()}, "max")
    return set(prog.optimum().chosen(y))


def fractional_matching(G: nx.Graph) -> Dict[Edge, Fraction]:
    """
    A maximum fractional matching: weights on the edges, summing to at
    most 1 at every vertex, with maximum total.  An optimum always exists
    with weights in {0, 1/2, 1}, so the program works with doubled integer
    weights in {0, 1, 2}.
    """
    G = as_simple_graph(G)
    EE = edge_list(G)
    if not EE:
        return {}

    prog = IntegerProgram("fractional_matching")
    w = prog.add_vars(EE, INTEGER, lb=0, ub=2)
    for v, star in incident_edges(G, EE).items():
        if star:
            prog.add_constraint({w[e]: 1 for e in star}, "<=", 2)
    prog.set_objective({i: 1 for i in w.values()}, "max")

    sol = prog.optimum()
    return {e: Fraction(int(round(sol.value(w[e]))), 2) for e in EE}


def kfactor(G: nx.Graph, k: int = 1) -> Set[Edge]:
    """
    A k-factor of G: a set of edges such that every vertex is incident with
    exactly k of them (k == 1 gives a perfect matching).

    Raises NoFactorError if G has no k-factor.
    """
    if k < 1:
        raise InvalidInputError("The parameter k must be positive")
    G = as_simple_graph(G)
    if G.number_of_nodes() == 0:
        return set()
    if (k * G.number_of_nodes()) % 2 == 1 or min(d for _, d in G.degree()) < k:
        raise NoFactorError(f"This graph does not have a {k}-factor")

    EE = edge_list(G)
    prog = IntegerProgram("kfactor")
    x = prog.add_binary_vars(EE)
    for v, star in incident_edges(G, EE).items():
        prog.add_constraint({x[e]: 1 for e in star}, "==", k)

    sol = prog.solve()
    if sol.is_infeasible:
        raise NoFactorError(f"This graph does not have a {k}-factor")
    return set(sol.chosen(x))
