"""Per-vertex and whole-graph signatures built from the vertex invariants."""
from __future__ import annotations

import hashlib
from collections import Counter
from typing import Dict, Hashable, List, Optional

import networkx as nx

from simplegraphalgorithms.invariants.vertex import spectral_moments, vertex_invariant_records

SIGNATURE_BYTES = 16


def _digest(obj: object) -> int:
    """128-bit blake2b digest of repr(obj); stable across processes."""
    digest = hashlib.blake2b(repr(obj).encode("ascii"), digest_size=SIGNATURE_BYTES).digest()
    return int.from_bytes(digest, byteorder="big", signed=False)


def info_map(G: nx.Graph) -> Dict[Hashable, int]:
    """
    Map the vertices of G to 128-bit integers such that twin vertices
    (images of one another under an automorphism) get the same value and,
    we hope, non-twins get different values.
    """
    return {v: _digest(rec) for v, rec in vertex_invariant_records(G).items()}


def refined_info_map(
    G: nx.Graph,
    base: Optional[Dict[Hashable, int]] = None,
) -> Dict[Hashable, int]:
    """
    info_map refined by WL-1 color refinement: each round replaces a
    vertex's value by the digest of (own value, sorted neighbor values),
    until the number of classes stops growing.  base, if given, must be
    info_map(G) (passed in to avoid recomputing it).

    Still automorphism invariant, and never coarser than info_map.
    """
    colors = dict(base) if base is not None else info_map(G)
    n_classes = len(set(colors.values()))
    while True:
        new = {
            v: _digest((colors[v], tuple(sorted(colors[w] for w in G.neighbors(v)))))
            for v in G.nodes()
        }
        new_classes = len(set(new.values()))
        if new_classes == n_classes:
            return colors
        colors, n_classes = new, new_classes


def uhash(G: nx.Graph, vertex_map: Optional[Dict[Hashable, int]] = None) -> int:
    """
    128-bit signature of G such that isomorphic graphs get the same value.

    Combines the sorted per-vertex signatures with the spectral moments.
    Non-isomorphic graphs can collide, so equal values are never proof
    of isomorphism.  vertex_map, if given, must be info_map(G).
    """
    if vertex_map is None:
        vertex_map = info_map(G)
    vertex_part = tuple(sorted(vertex_map.values()))
    return _digest((G.number_of_nodes(), G.number_of_edges(), vertex_part, spectral_moments(G)))


def signature_classes(colors: Dict[Hashable, int]) -> Dict[int, List[Hashable]]:
    """Group vertices by their signature value."""
    groups: Dict[int, List[Hashable]] = {}
    for v, c in colors.items():
        groups.setdefault(c, []).append(v)
    return groups


def class_profile(colors: Dict[Hashable, int]) -> Counter:
    """Multiset {signature: class size}."""
    return Counter(colors.values())
