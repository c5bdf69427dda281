from .cuts import min_cut, connectivity, min_edge_cut, edge_connectivity

__all__ = [
    "min_cut",
    "connectivity",
    "min_edge_cut",
    "edge_connectivity",
]
