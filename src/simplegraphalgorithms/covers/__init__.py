from .sets import (
    max_indep_set,
    max_clique,
    min_dom_set,
    min_vertex_cover,
    min_edge_cover,
)

__all__ = [
    "max_indep_set",
    "max_clique",
    "min_dom_set",
    "min_vertex_cover",
    "min_edge_cover",
]
