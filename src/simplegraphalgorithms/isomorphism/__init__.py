from .checks import fast_iso_test_basic, iso_check, hom_check
from .iso import iso, iso2, iso_matrix, is_iso
from .frac_iso import frac_iso, is_frac_iso
from .hom import hom, is_hom

__all__ = [
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
]
