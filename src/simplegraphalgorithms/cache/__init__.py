from .memo import IsoMemo, Recall

__all__ = [
    "IsoMemo",
    "Recall",
]
