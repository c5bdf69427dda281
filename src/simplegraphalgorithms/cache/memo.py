"""
Memo table for expensive per-graph results, keyed by isomorphism class.

Graphs are filed under their uhash() signature.  Signatures can collide,
so a bucket holds a short list of (graph, value) pairs and an exact
isomorphism test decides which entry, if any, matches the query.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

import networkx as nx

from simplegraphalgorithms.errors import CacheInconsistencyError
from simplegraphalgorithms.invariants.signature import uhash
from simplegraphalgorithms.isomorphism.iso import is_iso
from simplegraphalgorithms.utils.graphs import as_simple_graph

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Recall(Generic[T]):
    """Result of IsoMemo.lookup: found is False on a miss."""

    found: bool
    value: Optional[T] = None


_MISS: Recall[Any] = Recall(found=False)


class IsoMemo(Generic[T]):
    """
    Multi-map signature -> [(graph, value), ...] with exact-equivalence
    collision resolution.

    The caller owns the instance and its lifetime; nothing is shared
    between instances.  Not thread safe.

    equivalent: exact test deciding whether two graphs belong to the same
                class (defaults to is_iso).
    """

    def __init__(self, equivalent: Callable[[nx.Graph, nx.Graph], bool] = is_iso) -> None:
        self._equivalent = equivalent
        self._table: Dict[int, List[Tuple[nx.Graph, T]]] = {}

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"IsoMemo with {self.size()} graphs"

    def size(self) -> int:
        """Number of (graph, value) pairs held across all buckets."""
        return sum(len(bucket) for bucket in self._table.values())

    def buckets(self) -> int:
        return len(self._table)

    def clear(self) -> None:
        self._table = {}

    reset = clear

    def _find(self, G: nx.Graph, signature: int) -> Recall[T]:
        bucket = self._table.get(signature)
        if bucket is None:
            return _MISS
        for H, value in bucket:
            if self._equivalent(G, H):
                return Recall(found=True, value=value)
        logger.debug("signature collision: %d graphs share %032x", len(bucket), signature)
        return _MISS

    def lookup(self, G: nx.Graph, signature: Optional[int] = None) -> Recall[T]:
        """
        Return Recall(True, value) for the first stored graph isomorphic
        to G, or Recall(False) if there is none.

        signature: uhash(G), if the caller already has it.
        """
        G = as_simple_graph(G)
        if signature is None:
            signature = uhash(G)
        found = self._find(G, signature)
        logger.debug("memo %s for graph with %d vertices", "hit" if found.found else "miss", G.number_of_nodes())
        return found

    def store(self, G: nx.Graph, value: T, signature: Optional[int] = None) -> bool:
        """
        Remember value for the isomorphism class of G.  Nothing is added
        if an isomorphic graph is already present.

        Returns True iff a new entry was appended.
        """
        G = as_simple_graph(G)
        if signature is None:
            signature = uhash(G)
        if self._find(G, signature).found:
            return False
        self._table.setdefault(signature, []).append((G.copy(), value))
        return True

    def check_consistency(self) -> None:
        """
        Recompute every stored graph's signature and compare it with the
        bucket it lives in.  Raises CacheInconsistencyError on mismatch.
        """
        for signature, bucket in self._table.items():
            for H, _ in bucket:
                actual = uhash(H)
                if actual != signature:
                    raise CacheInconsistencyError(
                        f"graph with {H.number_of_nodes()} vertices filed under "
                        f"{signature:032x} but hashes to {actual:032x}"
                    )
