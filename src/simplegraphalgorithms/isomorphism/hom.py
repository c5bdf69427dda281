"""Graph homomorphisms as a binary program."""
from __future__ import annotations

import logging
from itertools import product
from typing import Dict, Hashable

import networkx as nx

from simplegraphalgorithms.errors import NotHomomorphicError
from simplegraphalgorithms.external.milp import IntegerProgram
from simplegraphalgorithms.utils.graphs import as_simple_graph, vertex_list

logger = logging.getLogger(__name__)


def hom(G: nx.Graph, H: nx.Graph) -> Dict[Hashable, Hashable]:
    """
    Find a graph homomorphism f: V(G) -> V(H), i.e. a map (not necessarily
    injective) with f(u)f(v) an edge of H for every edge uv of G.

    Program: P[v,x] binary with sum_x P[v,x] == 1 for each v, and for each
    edge uv of G and each ordered pair (x, y) of non-adjacent vertices of H
    (x == y included), P[u,x] + P[v,y] <= 1.

    Raises NotHomomorphicError if no homomorphism exists.
    """
    G = as_simple_graph(G)
    H = as_simple_graph(H)

    if G.number_of_nodes() == 0:
        return {}
    if H.number_of_nodes() == 0:
        raise NotHomomorphicError("No homomorphism into the graph with no vertices")
    if G.number_of_edges() > 0 and H.number_of_edges() == 0:
        logger.debug("hom: target has no edges")
        raise NotHomomorphicError()

    VG = vertex_list(G)
    VH = vertex_list(H)

    prog = IntegerProgram("hom")
    P = prog.add_binary_vars(product(VG, VH))

    for v in VG:
        prog.add_constraint({P[v, x]: 1 for x in VH}, "==", 1)

    non_edges = [(x, y) for x in VH for y in VH if not H.has_edge(x, y)]
    for u, v in G.edges():
        for x, y in non_edges:
            prog.add_constraint({P[u, x]: 1, P[v, y]: 1}, "<=", 1)

    sol = prog.solve()
    if sol.is_infeasible:
        raise NotHomomorphicError()
    return {v: x for v, x in sol.chosen(P)}


def is_hom(G: nx.Graph, H: nx.Graph) -> bool:
    """Is there a homomorphism from G to H?"""
    try:
        hom(G, H)
    except NotHomomorphicError:
        return False
    return True
