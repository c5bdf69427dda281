from .milp import (
    BINARY,
    INTEGER,
    CONTINUOUS,
    IntegerProgram,
    Solution,
    SolverOptions,
    get_solver_options,
    set_solver_options,
)

__all__ = [
    "BINARY",
    "INTEGER",
    "CONTINUOUS",
    "IntegerProgram",
    "Solution",
    "SolverOptions",
    "get_solver_options",
    "set_solver_options",
]
