from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp
from scipy.sparse import coo_matrix

from simplegraphalgorithms.errors import InvalidInputError, SolverError

logger = logging.getLogger(__name__)


def _env_float(name: str) -> Optional[float]:
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SolverOptions:
    """
    Knobs passed to the HiGHS backend of scipy.optimize.milp.

    time_limit:  seconds before the solve is abandoned (None = no limit)
    verbose:     echo solver progress to stdout
    mip_rel_gap: relative optimality gap for MIPs (None = solver default)
    tolerance:   threshold above which a binary variable is read as 1
    """

    time_limit: Optional[float] = None
    verbose: bool = False
    mip_rel_gap: Optional[float] = None
    tolerance: float = 0.5


_OPTIONS = SolverOptions(
    time_limit=_env_float("SGA_TIME_LIMIT"),
    verbose=_env_flag("SGA_VERBOSE"),
    mip_rel_gap=_env_float("SGA_MIP_GAP"),
)


def get_solver_options() -> SolverOptions:
    """Return the options used when solve() is called without explicit ones."""
    return _OPTIONS


def set_solver_options(**kwargs) -> SolverOptions:
    """
    Override the process-wide defaults, e.g. set_solver_options(time_limit=30).
    Returns the new options.
    """
    global _OPTIONS
    _OPTIONS = replace(_OPTIONS, **kwargs)
    return _OPTIONS


# ---------------------------------------------------------------------------
# Model builder
# ---------------------------------------------------------------------------

BINARY = "binary"
INTEGER = "integer"
CONTINUOUS = "continuous"

_SENSES = ("<=", "==", ">=")

Coefficients = Union[Mapping[int, float], Iterable[Tuple[int, float]]]

# scipy.optimize.milp status codes
_OPTIMAL = 0
_LIMIT = 1
_INFEASIBLE = 2
_UNBOUNDED = 3


@dataclass(frozen=True)
class Solution:
    """
    Outcome of IntegerProgram.solve().

    status is "optimal" or "infeasible"; every other solver outcome is
    raised as SolverError instead of being returned.
    """

    status: str
    x: Optional[np.ndarray]
    objective: Optional[float]
    tolerance: float = 0.5

    @property
    def is_optimal(self) -> bool:
        return self.status == "optimal"

    @property
    def is_infeasible(self) -> bool:
        return self.status == "infeasible"

    def value(self, idx: int) -> float:
        if self.x is None:
            raise SolverError(f"No values available for a {self.status} solution")
        return float(self.x[idx])

    def values(self, variables: Mapping[Hashable, int]) -> Dict[Hashable, float]:
        return {key: self.value(idx) for key, idx in variables.items()}

    def chosen(self, variables: Mapping[Hashable, int]) -> List[Hashable]:
        """Keys whose (binary) variable is set."""
        return [key for key, idx in variables.items() if self.value(idx) > self.tolerance]


class IntegerProgram:
    """
    Mixed integer linear program over indexed variables.

    Variables are referred to by the integer index returned from add_var;
    add_vars returns a dict from caller-chosen keys to indices so that
    constraints can be written in terms of vertices and edges.
    """

    def __init__(self, name: str = "model") -> None:
        self.name = name
        self._lb: List[float] = []
        self._ub: List[float] = []
        self._integral: List[int] = []
        self._rows: List[int] = []
        self._cols: List[int] = []
        self._data: List[float] = []
        self._row_lb: List[float] = []
        self._row_ub: List[float] = []
        self._objective: Dict[int, float] = {}
        self._maximize = False

    @property
    def num_vars(self) -> int:
        return len(self._lb)

    @property
    def num_constraints(self) -> int:
        return len(self._row_lb)

    def add_var(
        self,
        kind: str = BINARY,
        lb: float = 0.0,
        ub: float | None = None,
    ) -> int:
        if kind == BINARY:
            lb, ub = 0.0, 1.0
        elif kind not in (INTEGER, CONTINUOUS):
            raise InvalidInputError(f"Unknown variable kind {kind!r}")
        self._lb.append(lb)
        self._ub.append(np.inf if ub is None else ub)
        self._integral.append(0 if kind == CONTINUOUS else 1)
        return len(self._lb) - 1

    def add_vars(
        self,
        keys: Iterable[Hashable],
        kind: str = BINARY,
        lb: float = 0.0,
        ub: float | None = None,
    ) -> Dict[Hashable, int]:
        return {key: self.add_var(kind, lb, ub) for key in keys}

    def add_binary_vars(self, keys: Iterable[Hashable]) -> Dict[Hashable, int]:
        return self.add_vars(keys, BINARY)

    def add_constraint(self, coeffs: Coefficients, sense: str, rhs: float) -> int:
        """
        Add sum(coef * var) <sense> rhs.  Repeated indices are summed.
        Returns the row index.
        """
        if sense not in _SENSES:
            raise InvalidInputError(f"Constraint sense must be one of {_SENSES}, got {sense!r}")
        items = coeffs.items() if isinstance(coeffs, Mapping) else coeffs
        row = len(self._row_lb)
        for idx, coef in items:
            if coef == 0:
                continue
            self._rows.append(row)
            self._cols.append(idx)
            self._data.append(float(coef))
        self._row_lb.append(rhs if sense in ("==", ">=") else -np.inf)
        self._row_ub.append(rhs if sense in ("==", "<=") else np.inf)
        return row

    def set_objective(self, coeffs: Coefficients, sense: str = "min") -> None:
        if sense not in ("min", "max"):
            raise InvalidInputError(f"Objective sense must be 'min' or 'max', got {sense!r}")
        items = coeffs.items() if isinstance(coeffs, Mapping) else coeffs
        self._objective = {}
        for idx, coef in items:
            self._objective[idx] = self._objective.get(idx, 0.0) + float(coef)
        self._maximize = sense == "max"

    def solve(self, options: SolverOptions | None = None) -> Solution:
        """
        Solve with scipy.optimize.milp (HiGHS).

        Infeasibility is returned as Solution(status="infeasible").
        Time limits, unboundedness and any other failure raise SolverError;
        on a limit the best point found so far, if any, is kept in the
        error's incumbent attribute.
        """
        opts = options or get_solver_options()
        n = self.num_vars
        logger.debug(
            "solving %s: %d variables, %d constraints", self.name, n, self.num_constraints
        )

        if n == 0:
            # Nothing to decide; only constant rows can be violated.
            for lo, hi in zip(self._row_lb, self._row_ub):
                if lo > 0 or hi < 0:
                    return Solution("infeasible", None, None, opts.tolerance)
            return Solution("optimal", np.zeros(0), 0.0, opts.tolerance)

        c = np.zeros(n)
        for idx, coef in self._objective.items():
            c[idx] = coef
        if self._maximize:
            c = -c

        constraints = None
        if self._row_lb:
            A = coo_matrix(
                (self._data, (self._rows, self._cols)),
                shape=(len(self._row_lb), n),
            ).tocsr()
            constraints = LinearConstraint(A, np.array(self._row_lb), np.array(self._row_ub))

        solver_opts: Dict[str, object] = {"disp": opts.verbose}
        if opts.time_limit is not None:
            solver_opts["time_limit"] = opts.time_limit
        if opts.mip_rel_gap is not None:
            solver_opts["mip_rel_gap"] = opts.mip_rel_gap

        res = milp(
            c=c,
            integrality=np.array(self._integral),
            bounds=Bounds(np.array(self._lb), np.array(self._ub)),
            constraints=constraints,
            options=solver_opts,
        )
        logger.debug("%s: status=%s message=%s", self.name, res.status, res.message)

        if res.status == _OPTIMAL:
            objective = float(res.fun) if res.fun is not None else 0.0
            if self._maximize:
                objective = -objective
            return Solution("optimal", np.asarray(res.x), objective, opts.tolerance)
        if res.status == _INFEASIBLE:
            return Solution("infeasible", None, None, opts.tolerance)
        if res.status == _LIMIT:
            incumbent = None if res.x is None else np.asarray(res.x)
            raise SolverError(
                f"{self.name}: solver hit a time or iteration limit ({res.message})",
                res.status,
                incumbent=incumbent,
            )
        if res.status == _UNBOUNDED:
            raise SolverError(f"{self.name}: problem is unbounded ({res.message})", res.status)
        raise SolverError(f"{self.name}: solver failed ({res.message})", res.status)

    def optimum(self, options: SolverOptions | None = None) -> Solution:
        """
        solve() for programs that always have a feasible point; an
        infeasible report can only be a solver problem and raises SolverError.
        """
        sol = self.solve(options)
        if sol.is_infeasible:
            raise SolverError(f"{self.name}: solver reported an always-feasible program as infeasible")
        return sol
