"""Fractional isomorphism: a doubly stochastic matrix intertwining the adjacency matrices."""
from __future__ import annotations

import logging
from itertools import product

import networkx as nx
import numpy as np

from simplegraphalgorithms.errors import NotIsomorphicError
from simplegraphalgorithms.external.milp import CONTINUOUS, IntegerProgram
from simplegraphalgorithms.invariants.vertex import degdeg, degree_sequence
from simplegraphalgorithms.utils.graphs import as_simple_graph, vertex_list

logger = logging.getLogger(__name__)

_FRAC_ERR = "The graphs are not fractionally isomorphic"


def frac_iso(G: nx.Graph, H: nx.Graph) -> np.ndarray:
    """
    Find a doubly stochastic matrix S with A @ S == S @ B, where A and B
    are the adjacency matrices of G and H (rows/columns in vertex_list order).

    This is a linear program, so no integrality is imposed.  Fractional
    isomorphism is strictly weaker than isomorphism.
    Raises NotIsomorphicError if no such S exists.
    """
    G = as_simple_graph(G)
    H = as_simple_graph(H)

    # quick basic check before the LP
    if (
        G.number_of_nodes() != H.number_of_nodes()
        or degree_sequence(G) != degree_sequence(H)
        or degdeg(G) != degdeg(H)
    ):
        logger.debug("frac_iso: degree data differ")
        raise NotIsomorphicError(_FRAC_ERR)

    VG = vertex_list(G)
    VH = vertex_list(H)
    n = len(VG)
    if n == 0:
        return np.zeros((0, 0))

    prog = IntegerProgram("frac_iso")
    S = prog.add_vars(product(VG, VH), CONTINUOUS, lb=0.0, ub=1.0)

    for v in VG:
        prog.add_constraint({S[v, x]: 1 for x in VH}, "==", 1)
    for x in VH:
        prog.add_constraint({S[v, x]: 1 for v in VG}, "==", 1)
    for v in VG:
        Nv = list(G.neighbors(v))
        for x in VH:
            coeffs = [(S[w, x], 1) for w in Nv]
            coeffs.extend((S[v, y], -1) for y in H.neighbors(x))
            prog.add_constraint(coeffs, "==", 0)

    sol = prog.solve()
    if sol.is_infeasible:
        raise NotIsomorphicError(_FRAC_ERR)

    out = np.zeros((n, n))
    for i, v in enumerate(VG):
        for j, x in enumerate(VH):
            out[i, j] = sol.value(S[v, x])
    return out


def is_frac_iso(G: nx.Graph, H: nx.Graph) -> bool:
    """Test whether two graphs are fractionally isomorphic."""
    try:
        frac_iso(G, H)
    except NotIsomorphicError:
        return False
    return True
