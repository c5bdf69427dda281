"""
simplegraphalgorithms: graph algorithms on networkx graphs that rely on
integer programming (isomorphism, homomorphism, coloring, matching,
covers, cuts, maximum average degree), plus labeling-independent graph
signatures and an isomorphism-keyed memo table.
"""

from .errors import (
    GraphAlgorithmError,
    InfeasibleError,
    NotIsomorphicError,
    NotHomomorphicError,
    NotColorableError,
    NoFactorError,
    SolverError,
    InvalidInputError,
    CacheInconsistencyError,
)

# Solver configuration
from .external.milp import SolverOptions, get_solver_options, set_solver_options

# Invariants and signatures
from .invariants.vertex import degree_sequence, degdeg, spectral_moments, vertex_invariant_records
from .invariants.signature import info_map, uhash

# Isomorphism
from .isomorphism.checks import fast_iso_test_basic, iso_check, hom_check
from .isomorphism.iso import iso, iso2, iso_matrix, is_iso
from .isomorphism.frac_iso import frac_iso, is_frac_iso
from .isomorphism.hom import hom, is_hom

# Memo
from .cache.memo import IsoMemo, Recall

# Optimization clients
from .covers.sets import max_indep_set, max_clique, min_dom_set, min_vertex_cover, min_edge_cover
from .matching.matching import max_matching, fractional_matching, kfactor
from .coloring.vertex import vertex_color, chromatic_number
from .coloring.edge import edge_color, edge_chromatic_number
from .coloring.polynomial import chromatic_poly
from .connectivity.cuts import min_cut, connectivity, min_edge_cut, edge_connectivity
from .density.mad import ad, mad, mad_core

__all__ = [
    # Errors
    "GraphAlgorithmError",
    "InfeasibleError",
    "NotIsomorphicError",
    "NotHomomorphicError",
    "NotColorableError",
    "NoFactorError",
    "SolverError",
    "InvalidInputError",
    "CacheInconsistencyError",
    # Solver
    "SolverOptions",
    "get_solver_options",
    "set_solver_options",
    # Invariants
    "degree_sequence",
    "degdeg",
    "spectral_moments",
    "vertex_invariant_records",
    "info_map",
    "uhash",
    # Isomorphism
    "fast_iso_test_basic",
    "iso_check",
    "hom_check",
    "iso",
    "iso2",
    "iso_matrix",
    "is_iso",
    "frac_iso",
    "is_frac_iso",
    "hom",
    "is_hom",
    # Memo
    "IsoMemo",
    "Recall",
    # Covers
    "max_indep_set",
    "max_clique",
    "min_dom_set",
    "min_vertex_cover",
    "min_edge_cover",
    # Matching
    "max_matching",
    "fractional_matching",
    "kfactor",
    # Coloring
    "vertex_color",
    "chromatic_number",
    "edge_color",
    "edge_chromatic_number",
    "chromatic_poly",
    # Connectivity
    "min_cut",
    "connectivity",
    "min_edge_cut",
    "edge_connectivity",
    # Density
    "ad",
    "mad",
    "mad_core",
]
