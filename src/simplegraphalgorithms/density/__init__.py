from .mad import ad, mad, mad_core

__all__ = [
    "ad",
    "mad",
    "mad_core",
]
