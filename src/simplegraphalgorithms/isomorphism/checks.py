"""Solver-free tests: fast rejection and verification of candidate mappings."""
from __future__ import annotations

from typing import Hashable, Mapping

import networkx as nx

from simplegraphalgorithms.errors import InvalidInputError
from simplegraphalgorithms.invariants.vertex import degree_sequence
from simplegraphalgorithms.utils.graphs import as_simple_graph


def fast_iso_test_basic(G: nx.Graph, H: nx.Graph) -> bool:
    """
    Quick necessary condition for G ~ H: equal vertex counts, edge counts
    and degree sequences.  False proves the graphs are not isomorphic;
    True proves nothing.
    """
    return (
        G.number_of_nodes() == H.number_of_nodes()
        and G.number_of_edges() == H.number_of_edges()
        and degree_sequence(G) == degree_sequence(H)
    )


def _validate_mapping(G: nx.Graph, H: nx.Graph, d: Mapping[Hashable, Hashable]) -> None:
    if not isinstance(d, Mapping):
        raise InvalidInputError(f"Mapping must be a dict-like object, got {type(d).__name__}")
    if len(d) != G.number_of_nodes():
        raise InvalidInputError(
            f"Mapping has {len(d)} entries but the source graph has {G.number_of_nodes()} vertices"
        )
    for v, x in d.items():
        if v not in G:
            raise InvalidInputError(f"{v!r} is not a vertex of the source graph")
        if x not in H:
            raise InvalidInputError(f"{x!r} is not a vertex of the target graph")


def iso_check(G: nx.Graph, H: nx.Graph, d: Mapping[Hashable, Hashable]) -> bool:
    """
    Check whether d is an isomorphism from G to H in O(V + E).

    Raises InvalidInputError if d is not a map from V(G) into V(H).
    Edges are only checked in one direction: with equal edge counts, an
    injective edge-preserving map is automatically an isomorphism.
    """
    G = as_simple_graph(G)
    H = as_simple_graph(H)
    _validate_mapping(G, H, d)

    if not fast_iso_test_basic(G, H):
        return False
    if len(set(d.values())) != len(d):
        return False
    return all(H.has_edge(d[u], d[v]) for u, v in G.edges())


def hom_check(G: nx.Graph, H: nx.Graph, d: Mapping[Hashable, Hashable]) -> bool:
    """
    Check whether d is a graph homomorphism from G to H, i.e. every edge
    uv of G is sent to an edge d[u]d[v] of H.
    """
    G = as_simple_graph(G)
    H = as_simple_graph(H)
    _validate_mapping(G, H, d)
    return all(H.has_edge(d[u], d[v]) for u, v in G.edges())
