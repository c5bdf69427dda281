"""Chromatic polynomial by deletion/contraction with an isomorphism-keyed memo."""
from __future__ import annotations

import logging
from typing import Optional

import networkx as nx
import sympy

from simplegraphalgorithms.cache.memo import IsoMemo
from simplegraphalgorithms.utils.graphs import (
    as_simple_graph,
    contract_edge,
    delete_edge,
    delete_vertex,
    induced,
    is_complete,
    vertex_list,
)

logger = logging.getLogger(__name__)

x = sympy.Symbol("x")


def chromatic_poly(G: nx.Graph, memo: Optional[IsoMemo] = None) -> sympy.Poly:
    """
    Chromatic polynomial of G as a sympy.Poly in x.

    Uses deletion/contraction, short-circuiting on graphs whose polynomial
    is known in closed form (edgeless, complete, trees) and splitting
    disconnected graphs into components.  Intermediate results are kept in
    memo, keyed by isomorphism class, so that each class is expanded once.

    memo: an IsoMemo to read from and add to.  Pass the same instance to
          several calls to share work between them; by default every call
          starts from an empty memo.
    """
    G = as_simple_graph(G)
    if memo is None:
        memo = IsoMemo()
    return _chromatic_poly(G, memo)


def _chromatic_poly(G: nx.Graph, memo: IsoMemo) -> sympy.Poly:
    n = G.number_of_nodes()
    m = G.number_of_edges()

    if n == 0:
        return sympy.Poly(1, x)
    if m == 0:
        return sympy.Poly(x**n, x)
    if is_complete(G):
        return sympy.Poly(sympy.prod([x - k for k in range(n)]), x)

    comps = list(nx.connected_components(G))
    if len(comps) > 1:
        result = sympy.Poly(1, x)
        for comp in comps:
            result = result * _chromatic_poly(induced(G, comp), memo)
        return result

    if m == n - 1:
        return sympy.Poly(x * (x - 1) ** (n - 1), x)

    recall = memo.lookup(G)
    if recall.found:
        return recall.value

    P = _deletion_contraction(G, memo)
    memo.store(G, P)
    return P


def _deletion_contraction(G: nx.Graph, memo: IsoMemo) -> sympy.Poly:
    """P(G) = P(G - e) - P(G / e) on an edge at a vertex of minimum degree."""
    order = vertex_list(G)
    min_d = min(d for _, d in G.degree())
    u = next(w for w in order if G.degree(w) == min_d)
    v = next(w for w in order if G.has_edge(u, w))
    logger.debug("expanding graph with %d vertices, %d edges at %r-%r",
                 G.number_of_nodes(), G.number_of_edges(), u, v)

    if min_d == 1:
        # a leaf can take any color but its neighbor's
        return _chromatic_poly(delete_vertex(G, u), memo) * sympy.Poly(x - 1, x)

    p1 = _chromatic_poly(delete_edge(G, u, v), memo)
    p2 = _chromatic_poly(contract_edge(G, u, v), memo)
    return p1 - p2
