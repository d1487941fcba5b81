"""Primal Simplex solver for linear programs in standard form.

Solves problems of the form:

    Maximize:   c^T x
    Subject to: A x <= b, x >= 0, b >= 0

The tableau has one row per constraint plus an objective row, and one column
per original variable, one slack column per constraint and a right-hand-side
column:

    [ original vars | slack vars (identity) | RHS ]
    [ -c            | 0                     | z   ]

Pivoting rules:
1. Entering column: most negative objective-row coefficient, leftmost on ties
2. Leaving row: minimum ratio RHS / entry over entries above the pivot
   tolerance, first row on ties
3. Repeat until no negative coefficient remains or the iteration cap is hit

Neither rule is anti-cycling (this is not Bland's rule) and degenerate pivots
are accepted, so the iteration cap is what guarantees termination.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from penalty_nash.parameters import (
    BASIC_VARIABLE_TOLERANCE,
    DEFAULT_MAX_ITERATIONS,
    PIVOT_TOLERANCE,
)
from penalty_nash.solver.errors import (
    InvalidDimensionsError,
    MaxIterationsError,
    UnboundedError,
)

logger = logging.getLogger(__name__)


class Simplex:
    """Tableau Simplex solver for one linear program.

    The instance owns its tableau and mutates it in place while solving.
    Build a new instance for every problem.

    Example:
        >>> solver = Simplex([3.0, 2.0], [[1.0, 1.0], [1.0, 0.0], [0.0, 1.0]], [4.0, 2.0, 3.0])
        >>> value, x = solver.solve()
        >>> round(value, 6), [round(v, 6) for v in x]
        (10.0, [2.0, 2.0])
    """

    def __init__(
        self,
        c: Sequence[float],
        a: Sequence[Sequence[float]],
        b: Sequence[float],
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = PIVOT_TOLERANCE,
    ) -> None:
        """Build the initial tableau.

        Args:
            c: Objective coefficients to maximize (length n)
            a: Constraint matrix, one row of length n per constraint
            b: Right-hand side (length m), non-negative by caller contract
            max_iterations: Pivot budget for solve()
            tolerance: Minimum pivot-column entry for the ratio test

        Raises:
            InvalidDimensionsError: If len(b) != len(a) or any row of a has a
                length other than len(c)
        """
        num_vars = len(c)
        num_constraints = len(a)

        if len(b) != num_constraints:
            raise InvalidDimensionsError(
                f"Right-hand side has {len(b)} entries for {num_constraints} constraints"
            )
        for i, row in enumerate(a):
            if len(row) != num_vars:
                raise InvalidDimensionsError(
                    f"Constraint row {i} has {len(row)} coefficients, expected {num_vars}"
                )

        total_cols = num_vars + num_constraints + 1
        tableau = [[0.0] * total_cols for _ in range(num_constraints + 1)]

        for i in range(num_constraints):
            for j in range(num_vars):
                tableau[i][j] = float(a[i][j])
            tableau[i][num_vars + i] = 1.0
            tableau[i][-1] = float(b[i])

        for j in range(num_vars):
            tableau[num_constraints][j] = -float(c[j])

        self._tableau = tableau
        self.num_vars = num_vars
        self.num_constraints = num_constraints
        self.max_iterations = max_iterations
        self.tolerance = tolerance
        self.iterations = 0

    @property
    def tableau(self) -> list[list[float]]:
        """Current tableau (for inspection and debugging)."""
        return self._tableau

    def solve(self) -> tuple[float, list[float]]:
        """Run the Simplex method to optimality.

        Returns:
            Tuple of (optimal_value, solution) where solution holds one value
            per original variable

        Raises:
            UnboundedError: If an entering column has no valid leaving row
            MaxIterationsError: If max_iterations pivots did not reach optimality
        """
        for _ in range(self.max_iterations):
            pivot_col = self._find_pivot_column()
            if pivot_col is None:
                value, solution = self._extract_solution()
                logger.debug(f"Simplex optimal after {self.iterations} pivots: value={value}")
                return value, solution

            pivot_row = self._find_pivot_row(pivot_col)
            logger.debug(
                f"Pivot {self.iterations + 1}: entering column {pivot_col}, leaving row {pivot_row}"
            )
            self._pivot(pivot_row, pivot_col)
            self.iterations += 1

        logger.warning(f"Simplex hit the iteration cap ({self.max_iterations}) without converging")
        raise MaxIterationsError(self.max_iterations)

    def _find_pivot_column(self) -> int | None:
        """Return the entering column, or None when the tableau is optimal."""
        objective = self._tableau[self.num_constraints]
        min_val = 0.0
        min_col = None
        for j in range(len(objective) - 1):
            if objective[j] < min_val:
                min_val = objective[j]
                min_col = j
        return min_col

    def _find_pivot_row(self, pivot_col: int) -> int:
        """Return the leaving row using the minimum-ratio test.

        Pivoting can leave a right-hand side of -0.0 or -1e-17; such rows stay
        eligible and win the test with their (non-positive) ratio.
        """
        min_ratio = float("inf")
        min_row = None
        for i in range(self.num_constraints):
            row = self._tableau[i]
            coeff = row[pivot_col]
            if coeff > self.tolerance:
                ratio = row[-1] / coeff
                if ratio < min_ratio:
                    min_ratio = ratio
                    min_row = i

        if min_row is None:
            raise UnboundedError(f"Problem is unbounded along column {pivot_col}")
        return min_row

    def _pivot(self, pivot_row: int, pivot_col: int) -> None:
        """Normalize the pivot row and eliminate the pivot column elsewhere."""
        tableau = self._tableau
        pivot_values = tableau[pivot_row]
        pivot_val = pivot_values[pivot_col]
        for j in range(len(pivot_values)):
            pivot_values[j] /= pivot_val

        for i, row in enumerate(tableau):
            if i == pivot_row:
                continue
            factor = row[pivot_col]
            if factor == 0.0:
                continue
            for j in range(len(row)):
                row[j] -= factor * pivot_values[j]

    def _extract_solution(self) -> tuple[float, list[float]]:
        """Read the optimal value and the original variables from the tableau.

        A column is basic when exactly one entry is 1 and every other entry
        is 0 (objective row included). Its value is the RHS of that row when
        the row is a constraint row. Non-basic variables are zero.
        Columns are scanned left to right; the first unit column wins a row.
        """
        tableau = self._tableau
        solution = [0.0] * self.num_vars
        # Duplicate columns produce identical unit vectors; only the first one
        # may take the row.
        claimed_rows: set[int] = set()

        for j in range(self.num_vars):
            basic_row = None
            is_basic = True
            for i in range(self.num_constraints + 1):
                val = tableau[i][j]
                if abs(val - 1.0) < BASIC_VARIABLE_TOLERANCE:
                    if basic_row is not None:
                        is_basic = False
                        break
                    basic_row = i
                elif abs(val) > BASIC_VARIABLE_TOLERANCE:
                    is_basic = False
                    break

            if is_basic and basic_row is not None and basic_row not in claimed_rows:
                claimed_rows.add(basic_row)
                if basic_row < self.num_constraints:
                    solution[j] = tableau[basic_row][-1]

        optimal_value = tableau[self.num_constraints][-1]
        return optimal_value, solution
