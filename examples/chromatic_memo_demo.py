import logging
import time

import networkx as nx

from simplegraphalgorithms import IsoMemo, chromatic_poly

logging.basicConfig(level=logging.INFO)

memo = IsoMemo()
graphs = {
    "C7": nx.cycle_graph(7),
    "W6": nx.wheel_graph(6),
    "prism": nx.circular_ladder_graph(3),
    "C7 again": nx.relabel_nodes(nx.cycle_graph(7), lambda v: (3 * v) % 7),
}

for name, G in graphs.items():
    t0 = time.time()
    P = chromatic_poly(G, memo)
    print(f"{name}: {P.as_expr()}  (memo {memo.size()} graphs, {time.time() - t0:.2f}s)")
