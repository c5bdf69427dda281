from __future__ import annotations

from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

import networkx as nx
import numpy as np


def as_simple_graph(G: nx.Graph) -> nx.Graph:
    """
    Normalize any networkx graph to a simple undirected nx.Graph.

    Directed edges become undirected, parallel edges are merged and
    self-loops are dropped.  A graph that is already simple is returned
    unchanged (not copied).
    """
    if (
        type(G) is nx.Graph
        and nx.number_of_selfloops(G) == 0
    ):
        return G
    H = nx.Graph()
    H.add_nodes_from(G.nodes())
    H.add_edges_from((u, v) for u, v in G.edges() if u != v)
    return H


def vertex_list(G: nx.Graph) -> List[Hashable]:
    """
    Deterministic vertex order: sorted when the labels are mutually
    comparable, insertion order otherwise.
    """
    nodes = list(G.nodes())
    try:
        return sorted(nodes)
    except TypeError:
        return nodes


def edge_list(G: nx.Graph) -> List[Tuple[Hashable, Hashable]]:
    """
    Edges as (u, v) with u before v in vertex_list(G), in lex order of positions.
    """
    pos = {v: i for i, v in enumerate(vertex_list(G))}
    eds = []
    for u, v in G.edges():
        if pos[u] > pos[v]:
            u, v = v, u
        eds.append((u, v))
    eds.sort(key=lambda e: (pos[e[0]], pos[e[1]]))
    return eds


def adjacency_array(G: nx.Graph, vertices: Optional[Sequence[Hashable]] = None) -> np.ndarray:
    """Dense 0/1 int64 adjacency matrix with rows in the given vertex order."""
    if vertices is None:
        vertices = vertex_list(G)
    pos = {v: i for i, v in enumerate(vertices)}
    n = len(vertices)
    A = np.zeros((n, n), dtype=np.int64)
    for u, v in G.edges():
        if u == v:
            continue
        A[pos[u], pos[v]] = 1
        A[pos[v], pos[u]] = 1
    return A


def laplacian_array(G: nx.Graph, vertices: Optional[Sequence[Hashable]] = None) -> np.ndarray:
    """Dense int64 Laplacian D - A."""
    A = adjacency_array(G, vertices)
    return np.diag(A.sum(axis=1)) - A


def delete_edge(G: nx.Graph, u: Hashable, v: Hashable) -> nx.Graph:
    """Copy of G without the edge uv."""
    H = G.copy()
    H.remove_edge(u, v)
    return H


def delete_vertex(G: nx.Graph, v: Hashable) -> nx.Graph:
    """Copy of G without vertex v."""
    H = G.copy()
    H.remove_node(v)
    return H


def contract_edge(G: nx.Graph, u: Hashable, v: Hashable) -> nx.Graph:
    """
    Copy of G with v merged into u.  The resulting loop is dropped and
    parallel edges collapse since the result is a simple graph.  The copy
    carries no node or edge attributes.
    """
    H = nx.Graph()
    H.add_nodes_from(w for w in G.nodes() if w != v)
    for a, b in G.edges():
        a = u if a == v else a
        b = u if b == v else b
        if a != b:
            H.add_edge(a, b)
    return H


def induced(G: nx.Graph, vertices: Iterable[Hashable]) -> nx.Graph:
    """Owned copy of the subgraph of G induced on vertices."""
    return G.subgraph(vertices).copy()


def is_complete(G: nx.Graph) -> bool:
    n = G.number_of_nodes()
    return 2 * G.number_of_edges() == n * (n - 1)


def incident_edges(
    G: nx.Graph,
    edges: Optional[Sequence[Tuple[Hashable, Hashable]]] = None,
) -> dict:
    """Map each vertex to the edges (from edge_list order) that contain it."""
    if edges is None:
        edges = edge_list(G)
    star: dict = {v: [] for v in G.nodes()}
    for e in edges:
        star[e[0]].append(e)
        star[e[1]].append(e)
    return star
