import itertools

import networkx as nx

from simplegraphalgorithms import iso, iso_check, uhash

# Kneser graph K(5,2): 2-subsets of {0..4}, adjacent when disjoint
pairs = [frozenset(p) for p in itertools.combinations(range(5), 2)]
K = nx.Graph()
K.add_nodes_from(pairs)
K.add_edges_from((a, b) for a, b in itertools.combinations(pairs, 2) if not a & b)

P = nx.petersen_graph()

print("uhash K(5,2):", format(uhash(K), "032x"))
print("uhash Petersen:", format(uhash(P), "032x"))

d = iso(K, P)
for v in sorted(d, key=sorted):
    print(sorted(v), "->", d[v])
print("Valid isomorphism?", iso_check(K, P, d))
