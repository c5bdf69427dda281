"""Exception hierarchy shared by every algorithm in the package.

A definitive negative answer ("these graphs are not isomorphic", "no
3-coloring exists") is an :class:`InfeasibleError`.  Trouble inside the
solver is a :class:`SolverError` and must never be read as a negative answer.
"""
from __future__ import annotations


class GraphAlgorithmError(Exception):
    """Base class for all errors raised by simplegraphalgorithms."""


class InfeasibleError(GraphAlgorithmError):
    """The requested object provably does not exist."""


class NotIsomorphicError(InfeasibleError):
    def __init__(self, message: str = "The graphs are not isomorphic") -> None:
        super().__init__(message)


class NotHomomorphicError(InfeasibleError):
    def __init__(self, message: str = "No homomorphism exists") -> None:
        super().__init__(message)


class NotColorableError(InfeasibleError):
    pass


class NoFactorError(InfeasibleError):
    pass


class SolverError(GraphAlgorithmError, RuntimeError):
    """
    The solver failed, timed out, or returned an ambiguous status.

    incumbent: the best feasible point found before a time or iteration
               limit stopped the solve, or None if there was none.
    """

    def __init__(self, message: str, status: int | None = None, incumbent=None) -> None:
        super().__init__(message)
        self.status = status
        self.incumbent = incumbent


class InvalidInputError(GraphAlgorithmError, ValueError):
    """Malformed arguments, detected before any solver call."""


class CacheInconsistencyError(GraphAlgorithmError):
    """A memo entry no longer matches the signature it was filed under."""
