"""Linear-programming and zero-sum game solvers.

This module contains the numeric core:
- simplex: Primal tableau Simplex for max c^T x, Ax <= b, x >= 0
- game: Equilibrium strategies and value of a zero-sum payoff matrix
- nash: Equilibrium wrapper and epsilon-Nash verification
- errors: Exception hierarchy shared by all solvers

Usage:
    from penalty_nash.solver import NashEquilibrium

    nash = NashEquilibrium.find([[1, -1], [-1, 1]])
    print(nash.row_strategy, nash.col_strategy, nash.value)
"""

from penalty_nash.solver.errors import (
    DimensionError,
    EmptyMatrixError,
    InconsistentRowsError,
    InfeasibleError,
    InvalidDimensionsError,
    MaxIterationsError,
    SolverError,
    UnboundedError,
)
from penalty_nash.solver.game import (
    GameSolution,
    GameSolver,
    expected_payoff,
    gaussian_elimination,
)
from penalty_nash.solver.nash import NashEquilibrium
from penalty_nash.solver.simplex import Simplex

__all__ = [
    # Solvers
    "Simplex",
    "GameSolver",
    "GameSolution",
    "NashEquilibrium",
    # Functions
    "expected_payoff",
    "gaussian_elimination",
    # Errors
    "SolverError",
    "DimensionError",
    "InvalidDimensionsError",
    "InconsistentRowsError",
    "EmptyMatrixError",
    "UnboundedError",
    "InfeasibleError",
    "MaxIterationsError",
]
