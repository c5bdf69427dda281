from .matching import max_matching, fractional_matching, kfactor

__all__ = [
    "max_matching",
    "fractional_matching",
    "kfactor",
]
