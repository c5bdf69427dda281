"""Labeling-independent fingerprints of graphs and of their vertices."""
from __future__ import annotations

from typing import Dict, Hashable, List, Tuple

import networkx as nx
import numpy as np

from simplegraphalgorithms.utils.graphs import adjacency_array, laplacian_array

VertexRecord = Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]

UNREACHABLE = -1
MOMENT_DEPTH = 10


def degree_sequence(G: nx.Graph) -> List[int]:
    """Degrees sorted in non-increasing order."""
    return sorted((d for _, d in G.degree()), reverse=True)


def distance_profile(G: nx.Graph, v: Hashable) -> Tuple[int, ...]:
    """
    Sorted BFS distances from v to every other vertex.
    Vertices in other components contribute UNREACHABLE.
    """
    lengths = nx.single_source_shortest_path_length(G, v)
    dists = [lengths.get(w, UNREACHABLE) for w in G.nodes() if w != v]
    return tuple(sorted(dists))


def _neighbor_degrees(G: nx.Graph, v: Hashable) -> Tuple[int, ...]:
    return tuple(sorted(G.degree(w) for w in G.neighbors(v)))


def vertex_invariant_records(G: nx.Graph) -> Dict[Hashable, VertexRecord]:
    """
    Map each vertex to a record that any automorphism preserves:

      (sorted degrees of its neighbors,
       sorted degrees of its neighbors in the complement,
       sorted distances to all other vertices,
       sorted distances to all other vertices in the complement)

    Twin vertices always get equal records; unequal records prove two
    vertices are not twins.  The converse does not hold.
    """
    if G.number_of_nodes() == 0:
        return {}
    Gc = nx.complement(G)
    return {
        v: (
            _neighbor_degrees(G, v),
            _neighbor_degrees(Gc, v),
            distance_profile(G, v),
            distance_profile(Gc, v),
        )
        for v in G.nodes()
    }


def spectral_moments(G: nx.Graph, k_max: int = MOMENT_DEPTH) -> Tuple[int, ...]:
    """
    (tr A, tr A^2, ..., tr A^k_max, tr L, tr L^2, ..., tr L^k_max)

    Computed by repeated int64 matrix products.  Large powers wrap around,
    so each entry is exact modulo 2**64; that is still a function of the
    isomorphism class since relabeling only conjugates by a permutation.
    """
    if k_max < 1:
        raise ValueError("k_max must be >= 1.")
    out: List[int] = []
    for M in (adjacency_array(G), laplacian_array(G)):
        P = M.copy()
        with np.errstate(over="ignore"):
            for _ in range(k_max):
                out.append(int(np.trace(P)))
                P = P @ M
    return tuple(out)


def degdeg(G: nx.Graph) -> Tuple[Tuple[int, ...], ...]:
    """
    For each vertex the sorted degrees of its neighbors; rows sorted.
    Equal for fractionally isomorphic graphs.
    """
    return tuple(sorted(_neighbor_degrees(G, v) for v in G.nodes()))
