from .vertex import vertex_color, chromatic_number
from .edge import edge_color, edge_chromatic_number
from .polynomial import chromatic_poly

__all__ = [
    "vertex_color",
    "chromatic_number",
    "edge_color",
    "edge_chromatic_number",
    "chromatic_poly",
]
