"""
Exact graph isomorphism.

iso() runs the two-phase algorithm: invariant-based rejection, then a
binary program over the assignment matrix P[v, x] ("v maps to x") whose
variables are tied to invariant classes.  iso2() skips the invariants and
hands the bare program to the solver, which is the better choice for
vertex-transitive graphs where every vertex lands in one class anyway.
"""
from __future__ import annotations

import logging
from itertools import product
from typing import Dict, Hashable, List, Mapping, Optional, Tuple

import networkx as nx
import numpy as np

from simplegraphalgorithms.errors import NotIsomorphicError
from simplegraphalgorithms.external.milp import IntegerProgram
from simplegraphalgorithms.invariants.signature import (
    class_profile,
    info_map,
    refined_info_map,
    signature_classes,
    uhash,
)
from simplegraphalgorithms.isomorphism.checks import fast_iso_test_basic, iso_check
from simplegraphalgorithms.utils.graphs import as_simple_graph, vertex_list

logger = logging.getLogger(__name__)

Assignment = Dict[Tuple[Hashable, Hashable], int]


def _assignment_program(
    G: nx.Graph,
    H: nx.Graph,
    VG: List[Hashable],
    VH: List[Hashable],
    name: str,
) -> Tuple[IntegerProgram, Assignment]:
    """
    Binary program whose feasible points are exactly the isomorphisms G -> H:

      sum_x P[v,x] == 1                                  for each v
      sum_v P[v,x] == 1                                  for each x
      sum_{w ~ v} P[w,x] == sum_{y ~ x} P[v,y]           for each v, x   (A P = P B)
    """
    prog = IntegerProgram(name)
    P = prog.add_binary_vars(product(VG, VH))

    for v in VG:
        prog.add_constraint({P[v, x]: 1 for x in VH}, "==", 1)
    for x in VH:
        prog.add_constraint({P[v, x]: 1 for v in VG}, "==", 1)

    for v in VG:
        Nv = list(G.neighbors(v))
        for x in VH:
            coeffs = [(P[w, x], 1) for w in Nv]
            coeffs.extend((P[v, y], -1) for y in H.neighbors(x))
            prog.add_constraint(coeffs, "==", 0)

    return prog, P


def _solve_assignment(prog: IntegerProgram, P: Assignment) -> Dict[Hashable, Hashable]:
    sol = prog.solve()
    if sol.is_infeasible:
        logger.debug("%s: solver reports infeasible", prog.name)
        raise NotIsomorphicError()
    return {v: x for v, x in sol.chosen(P)}


def _reject(reason: str) -> None:
    logger.debug("not isomorphic: %s", reason)
    raise NotIsomorphicError(f"The graphs are not isomorphic ({reason})")


def iso(G: nx.Graph, H: nx.Graph, *, refine: bool = True) -> Dict[Hashable, Hashable]:
    """
    Find an isomorphism from G to H, returned as a dict V(G) -> V(H).

    Raises NotIsomorphicError if none exists and SolverError if the solver
    cannot decide.

    Phases:
      1. vertex/edge counts and degree sequences
      2. graph signatures (uhash)
      3. per-vertex signature classes; sizes must agree class by class
      4. assignment program with one extra constraint per class:
         the mass sent from G's class to H's class equals the class size

    refine: split the signature classes further by WL-1 refinement before
            building class constraints.
    """
    G = as_simple_graph(G)
    H = as_simple_graph(H)

    if not fast_iso_test_basic(G, H):
        _reject("vertex count, edge count or degree sequence differ")
    if G.number_of_nodes() == 0:
        return {}

    dG = info_map(G)
    dH = info_map(H)
    if uhash(G, dG) != uhash(H, dH):
        _reject("graph signatures differ")

    if refine:
        dG = refined_info_map(G, dG)
        dH = refined_info_map(H, dH)
    if class_profile(dG) != class_profile(dH):
        _reject("vertex signature classes differ")

    VG = vertex_list(G)
    VH = vertex_list(H)
    prog, P = _assignment_program(G, H, VG, VH, "iso")

    classesG = signature_classes(dG)
    classesH = signature_classes(dH)
    for sig, SG in classesG.items():
        SH = classesH[sig]
        prog.add_constraint({P[u, x]: 1 for u in SG for x in SH}, "==", len(SG))
    logger.debug("iso: %d vertices in %d classes", len(VG), len(classesG))

    return _solve_assignment(prog, P)


def iso2(G: nx.Graph, H: nx.Graph) -> Dict[Hashable, Hashable]:
    """
    Same contract as iso() but without signature pruning or class
    constraints.  Faster for highly symmetric graphs.
    """
    G = as_simple_graph(G)
    H = as_simple_graph(H)

    if not fast_iso_test_basic(G, H):
        _reject("vertex count, edge count or degree sequence differ")
    if G.number_of_nodes() == 0:
        return {}

    prog, P = _assignment_program(G, H, vertex_list(G), vertex_list(H), "iso2")
    return _solve_assignment(prog, P)


def iso_matrix(G: nx.Graph, H: nx.Graph) -> np.ndarray:
    """
    Permutation matrix P with A @ P == P @ B, where A and B are the
    adjacency matrices of G and H in vertex_list order.
    Raises NotIsomorphicError if the graphs are not isomorphic.
    """
    d = iso(G, H)
    VG = vertex_list(G)
    col = {x: j for j, x in enumerate(vertex_list(H))}
    P = np.zeros((len(VG), len(VG)), dtype=np.int64)
    for i, v in enumerate(VG):
        P[i, col[d[v]]] = 1
    return P


def is_iso(
    G: nx.Graph,
    H: nx.Graph,
    mapping: Optional[Mapping[Hashable, Hashable]] = None,
) -> bool:
    """
    is_iso(G, H): are the graphs isomorphic?
    is_iso(G, H, d): is d an isomorphism from G to H?

    Only a definitive "no" becomes False; solver errors propagate.
    """
    if mapping is not None:
        return iso_check(G, H, mapping)
    try:
        iso(G, H)
    except NotIsomorphicError:
        return False
    return True
