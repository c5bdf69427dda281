from __future__ import annotations

import logging
from typing import Dict, Hashable, Tuple

import networkx as nx

from simplegraphalgorithms.errors import InvalidInputError
from simplegraphalgorithms.external.milp import CONTINUOUS, IntegerProgram
from simplegraphalgorithms.utils.graphs import as_simple_graph, delete_vertex, edge_list, vertex_list

logger = logging.getLogger(__name__)


def ad(G: nx.Graph) -> float:
    """Average degree of G."""
    n = G.number_of_nodes()
    if n == 0:
        raise InvalidInputError("Average degree is undefined for a graph with no vertices")
    return 2 * G.number_of_edges() / n


def _mad_loads(G: nx.Graph) -> Tuple[float, Dict[Hashable, float]]:
    """
    Solve the LP whose optimum is mad(G):

      minimize z  subject to
        x[u,e] + x[v,e] == 2   for every edge e = uv   (each edge hands out 2)
        sum_{e at v} x[v,e] <= z   for every vertex v
        x >= 0

    Returns (z, load per vertex).
    """
    EE = edge_list(G)
    prog = IntegerProgram("mad")
    z = prog.add_var(CONTINUOUS, lb=0.0)
    x = prog.add_vars(((v, e) for e in EE for v in e), CONTINUOUS, lb=0.0)

    for e in EE:
        u, v = e
        prog.add_constraint({x[u, e]: 1, x[v, e]: 1}, "==", 2)
    star: Dict[Hashable, list] = {v: [] for v in G.nodes()}
    for v, e in x:
        star[v].append(x[v, e])
    for v, idxs in star.items():
        coeffs = [(i, 1) for i in idxs]
        coeffs.append((z, -1))
        prog.add_constraint(coeffs, "<=", 0)
    prog.set_objective({z: 1}, "min")

    sol = prog.optimum()
    loads = {v: sum(sol.value(i) for i in idxs) for v, idxs in star.items()}
    return sol.value(z), loads


def mad(G: nx.Graph) -> float:
    """Maximum average degree: the largest ad(H) over subgraphs H of G."""
    G = as_simple_graph(G)
    if G.number_of_edges() == 0:
        return 0.0
    value, _ = _mad_loads(G)
    return value


def mad_core(G: nx.Graph) -> nx.Graph:
    """
    A subgraph H of G with ad(H) == mad(G).

    Repeatedly solves the mad LP and deletes vertices whose load falls
    short of the optimum; vertices of a densest subgraph are always fully
    loaded, so they are never deleted.
    """
    GG = as_simple_graph(G).copy()
    if GG.number_of_nodes() == 0:
        raise InvalidInputError("mad_core is undefined for a graph with no vertices")

    while True:
        n = GG.number_of_nodes()
        if GG.number_of_edges() == 0:
            return GG
        mval, loads = _mad_loads(GG)
        err = 0.1 / n
        if abs(ad(GG) - mval) <= err:
            return GG
        defective = [v for v in vertex_list(GG) if loads[v] < mval - err]
        logger.debug("mad_core: removing %d of %d vertices", len(defective), n)
        for v in defective:
            GG = delete_vertex(GG, v)
