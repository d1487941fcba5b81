"""Exception types raised by the solvers.

Shape problems are detected eagerly when a solver is constructed and derive
from ValueError as well as SolverError. Failures discovered while solving
(unbounded or infeasible problems, an exhausted iteration budget) surface
unchanged to the caller; nothing is retried or relaxed.
"""


class SolverError(Exception):
    """Base class for every solver failure."""


class DimensionError(SolverError, ValueError):
    """Malformed input shape."""


class InvalidDimensionsError(DimensionError):
    """Constraint rows or right-hand side do not match the objective."""


class InconsistentRowsError(DimensionError):
    """Payoff matrix rows have different lengths."""


class EmptyMatrixError(DimensionError):
    """Payoff matrix has no rows or no columns."""


class UnboundedError(SolverError):
    """No row passes the minimum-ratio test for the entering column."""


class InfeasibleError(SolverError):
    """A derived system has no usable solution."""


class MaxIterationsError(SolverError):
    """The pivot budget ran out before the tableau became optimal."""

    def __init__(self, iterations: int) -> None:
        super().__init__(f"Maximum iterations exceeded ({iterations})")
        self.iterations = iterations
