"""Independent sets, cliques, dominating sets and covers as 0/1 programs."""
from __future__ import annotations

from typing import Hashable, Set, Tuple

import networkx as nx

from simplegraphalgorithms.errors import InvalidInputError
from simplegraphalgorithms.external.milp import IntegerProgram
from simplegraphalgorithms.utils.graphs import (
    as_simple_graph,
    edge_list,
    incident_edges,
    vertex_list,
)


def max_indep_set(G: nx.Graph) -> Set[Hashable]:
    """A maximum size independent set of G."""
    G = as_simple_graph(G)
    if G.number_of_nodes() == 0:
        return set()

    prog = IntegerProgram("max_indep_set")
    x = prog.add_binary_vars(vertex_list(G))
    for u, v in G.edges():
        prog.add_constraint({x[u]: 1, x[v]: 1}, "<=", 1)
    prog.set_objective({i: 1 for i in x.values()}, "max")
    return set(prog.optimum().chosen(x))


def max_clique(G: nx.Graph) -> Set[Hashable]:
    """A maximum size clique of G."""
    return max_indep_set(nx.complement(as_simple_graph(G)))


def min_dom_set(G: nx.Graph) -> Set[Hashable]:
    """
    A smallest set S such that every vertex is in S or adjacent to a
    vertex of S.
    """
    G = as_simple_graph(G)
    if G.number_of_nodes() == 0:
        return set()

    prog = IntegerProgram("min_dom_set")
    x = prog.add_binary_vars(vertex_list(G))
    for v in G.nodes():
        closed = [v, *G.neighbors(v)]
        prog.add_constraint({x[w]: 1 for w in closed}, ">=", 1)
    prog.set_objective({i: 1 for i in x.values()}, "min")
    return set(prog.optimum().chosen(x))


def min_vertex_cover(G: nx.Graph) -> Set[Hashable]:
    """A smallest set of vertices meeting every edge."""
    G = as_simple_graph(G)
    if G.number_of_edges() == 0:
        return set()

    prog = IntegerProgram("min_vertex_cover")
    x = prog.add_binary_vars(vertex_list(G))
    for u, v in G.edges():
        prog.add_constraint({x[u]: 1, x[v]: 1}, ">=", 1)
    prog.set_objective({i: 1 for i in x.values()}, "min")
    return set(prog.optimum().chosen(x))


def min_edge_cover(G: nx.Graph) -> Set[Tuple[Hashable, Hashable]]:
    """
    A smallest set of edges such that every vertex is the end point of at
    least one of them.  Raises InvalidInputError if G has an isolated vertex.
    """
    G = as_simple_graph(G)
    if G.number_of_nodes() == 0:
        return set()
    isolated = [v for v in G.nodes() if G.degree(v) == 0]
    if isolated:
        raise InvalidInputError(
            f"Graph has an isolated vertex ({isolated[0]!r}); no edge cover exists."
        )

    EE = edge_list(G)
    prog = IntegerProgram("min_edge_cover")
    y = prog.add_binary_vars(EE)
    for v, star in incident_edges(G, EE).items():
        prog.add_constraint({y[e]: 1 for e in star}, ">=", 1)
    prog.set_objective({i: 1 for i in y.values()}, "min")
    return set(prog.optimum().chosen(y))
