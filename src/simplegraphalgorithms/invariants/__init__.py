from .vertex import (
    VertexRecord,
    degree_sequence,
    distance_profile,
    vertex_invariant_records,
    spectral_moments,
    degdeg,
)
from .signature import (
    info_map,
    refined_info_map,
    uhash,
    signature_classes,
    class_profile,
)

__all__ = [
    "VertexRecord",
    "degree_sequence",
    "distance_profile",
    "vertex_invariant_records",
    "spectral_moments",
    "degdeg",
    "info_map",
    "refined_info_map",
    "uhash",
    "signature_classes",
    "class_profile",
]
