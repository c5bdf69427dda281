from __future__ import annotations

import logging
import math
import sys
from itertools import product
from typing import Dict, FrozenSet, Hashable, Optional

import networkx as nx

from simplegraphalgorithms.covers.sets import max_clique, max_indep_set
from simplegraphalgorithms.errors import InvalidInputError, NotColorableError
from simplegraphalgorithms.external.milp import IntegerProgram
from simplegraphalgorithms.utils.graphs import as_simple_graph, vertex_list

logger = logging.getLogger(__name__)


def _not_colorable(k: int) -> NotColorableError:
    return NotColorableError(f"This graph is not {k}-colorable")


def _two_color(G: nx.Graph) -> Dict[Hashable, int]:
    if not nx.is_bipartite(G):
        raise _not_colorable(2)
    return {v: c + 1 for v, c in nx.bipartite.color(G).items()}


def _k_color(G: nx.Graph, k: int) -> Dict[Hashable, int]:
    if k < 1:
        raise InvalidInputError("Number of colors must be positive")
    if G.number_of_nodes() == 0:
        return {}
    if k == 1:
        if G.number_of_edges() > 0:
            raise _not_colorable(1)
        return {v: 1 for v in G.nodes()}
    if k == 2:
        return _two_color(G)

    VV = vertex_list(G)
    colors = range(1, k + 1)
    prog = IntegerProgram("vertex_color")
    x = prog.add_binary_vars(product(VV, colors))
    for v in VV:
        prog.add_constraint({x[v, i]: 1 for i in colors}, "==", 1)
    for u, v in G.edges():
        for i in colors:
            prog.add_constraint({x[u, i]: 1, x[v, i]: 1}, "<=", 1)

    sol = prog.solve()
    if sol.is_infeasible:
        raise _not_colorable(k)
    return {v: i for v, i in sol.chosen(x)}


def _ab_color(G: nx.Graph, a: int, b: int) -> Dict[Hashable, FrozenSet[int]]:
    if a < 1 or b < 1:
        raise InvalidInputError("Both a and b must be positive")
    if G.number_of_nodes() == 0:
        return {}
    if b > a:
        raise NotColorableError(f"This graph is not {a}:{b}-colorable")

    VV = vertex_list(G)
    colors = range(1, a + 1)
    prog = IntegerProgram("vertex_ab_color")
    x = prog.add_binary_vars(product(VV, colors))
    for v in VV:
        prog.add_constraint({x[v, i]: 1 for i in colors}, "==", b)
    for u, v in G.edges():
        for i in colors:
            prog.add_constraint({x[u, i]: 1, x[v, i]: 1}, "<=", 1)

    sol = prog.solve()
    if sol.is_infeasible:
        raise NotColorableError(f"This graph is not {a}:{b}-colorable")
    result: Dict[Hashable, set] = {v: set() for v in VV}
    for v, i in sol.chosen(x):
        result[v].add(i)
    return {v: frozenset(s) for v, s in result.items()}


def vertex_color(G: nx.Graph, a: Optional[int] = None, b: Optional[int] = None):
    """
    vertex_color(G, k): a proper coloring with colors 1..k, as a dict.
    vertex_color(G):    the same with k = chromatic_number(G).
    vertex_color(G, a, b): an a:b-coloring, mapping every vertex to a
        b-element subset of {1..a} with adjacent vertices getting disjoint
        subsets.

    Raises NotColorableError if no such coloring exists.
    """
    G = as_simple_graph(G)
    if b is not None:
        if a is None:
            raise InvalidInputError("An a:b-coloring needs both a and b")
        return _ab_color(G, a, b)
    if a is None:
        a = chromatic_number(G)
    return _k_color(G, a)


def _colorable(G: nx.Graph, k: int) -> bool:
    try:
        _k_color(G, k)
    except NotColorableError:
        return False
    return True


def chromatic_number(G: nx.Graph, verbose: bool = False) -> int:
    """
    The least k such that G is k-colorable.

    Bisects between the lower bound max(ceil(n / alpha), omega) and the
    number of colors used by a greedy coloring.
    """
    G = as_simple_graph(G)
    n = G.number_of_nodes()
    if n == 0:
        return 0
    if G.number_of_edges() == 0:
        return 1

    alpha = len(max_indep_set(G))
    lb = max(math.ceil(n / alpha), len(max_clique(G)))
    ub = max(nx.greedy_color(G, strategy="largest_first").values()) + 1

    while lb < ub:
        mid = (lb + ub) // 2
        if verbose:
            print(f"{lb} <= chi(G) <= {ub}\tlooking for a {mid}-coloring", file=sys.stderr)
        if _colorable(G, mid):
            ub = mid
        else:
            lb = mid + 1
    if verbose:
        print(f"chi(G) = {lb}", file=sys.stderr)
    logger.debug("chromatic number %d for graph with %d vertices", lb, n)
    return lb
