from __future__ import annotations

from itertools import product
from typing import Dict, Hashable, Tuple

import networkx as nx

from simplegraphalgorithms.errors import InvalidInputError, NotColorableError
from simplegraphalgorithms.external.milp import IntegerProgram
from simplegraphalgorithms.utils.graphs import as_simple_graph, edge_list, incident_edges

Edge = Tuple[Hashable, Hashable]


def _max_degree(G: nx.Graph) -> int:
    return max((d for _, d in G.degree()), default=0)


def edge_color(G: nx.Graph, k: int) -> Dict[Edge, int]:
    """
    A proper k-edge-coloring of G (edges sharing an end point get different
    colors), as a dict edge -> color in 1..k.

    Raises NotColorableError if none exists.
    """
    if k < 1:
        raise InvalidInputError("Number of colors must be positive")
    G = as_simple_graph(G)
    EE = edge_list(G)
    if not EE:
        return {}
    if k < _max_degree(G):
        raise NotColorableError(f"This graph is not {k}-edge-colorable")

    colors = range(1, k + 1)
    prog = IntegerProgram("edge_color")
    x = prog.add_binary_vars(product(EE, colors))
    for e in EE:
        prog.add_constraint({x[e, i]: 1 for i in colors}, "==", 1)
    for v, star in incident_edges(G, EE).items():
        if len(star) < 2:
            continue
        for i in colors:
            prog.add_constraint({x[e, i]: 1 for e in star}, "<=", 1)

    sol = prog.solve()
    if sol.is_infeasible:
        raise NotColorableError(f"This graph is not {k}-edge-colorable")
    return {e: i for e, i in sol.chosen(x)}


def edge_chromatic_number(G: nx.Graph) -> int:
    """
    The least k with a proper k-edge-coloring.  By Vizing's theorem this
    is the maximum degree or one more, so a single feasibility test decides.
    """
    G = as_simple_graph(G)
    d = _max_degree(G)
    if d == 0:
        return 0
    try:
        edge_color(G, d)
    except NotColorableError:
        return d + 1
    return d
