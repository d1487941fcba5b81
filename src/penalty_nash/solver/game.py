"""Two-player zero-sum game solver built on the Simplex LP engine.

The payoff matrix is given from the Row player's perspective: Row maximizes,
Column minimizes. Solving proceeds in four stages:

1. Positivity shift: add shift = max(0, 1 - min_entry) to every payoff so the
   LP below is well posed with a right-hand side of ones.
2. Column player's LP:
       Maximize:   sum(z_j)
       Subject to: sum_j a_ij * z_j <= 1 for every row i, z_j >= 0
   The Column strategy is z / sum(z) and the shifted value is 1 / sum(z).
3. Row player's strategy from the Column support. Columns with z_j above the
   support threshold are active. One active column means Row plays the pure
   best response to it. Several active columns mean Row must make Column
   indifferent between them:
       sum_i (a_i,j0 - a_i,jk) * p_i = 0   for every other active column jk
       sum_i p_i = 1
   solved by Gaussian elimination with partial pivoting, negatives clamped
   and renormalized. The derived strategy must guarantee the shifted value;
   degenerate supports that do not are re-solved as the Row player's own LP
   on the transposed, negated game.
4. Game value: min_j sum_i p_i * a_ij on the original, unshifted matrix.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from penalty_nash.config import SolverConfig
from penalty_nash.parameters import ELIMINATION_PIVOT_TOLERANCE
from penalty_nash.solver.errors import (
    EmptyMatrixError,
    InconsistentRowsError,
    InfeasibleError,
)
from penalty_nash.solver.simplex import Simplex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSolution:
    """Equilibrium of a two-player zero-sum game.

    Attributes:
        row_strategy: Row player's (maximizer's) mixed strategy
        col_strategy: Column player's (minimizer's) mixed strategy
        game_value: Expected payoff to Row under equilibrium play
    """

    row_strategy: tuple[float, ...]
    col_strategy: tuple[float, ...]
    game_value: float


def expected_payoff(
    payoff_matrix: Sequence[Sequence[float]],
    row_strategy: Sequence[float],
    col_strategy: Sequence[float],
) -> float:
    """Expected payoff to Row for a pair of mixed strategies.

    Computes the bilinear form sum_i sum_j p_i * q_j * a_ij.
    """
    payoff = 0.0
    for i, row in enumerate(payoff_matrix):
        for j, value in enumerate(row):
            payoff += row_strategy[i] * col_strategy[j] * value
    return payoff


def gaussian_elimination(
    matrix: Sequence[Sequence[float]],
    rhs: Sequence[float],
    tolerance: float = ELIMINATION_PIVOT_TOLERANCE,
) -> list[float]:
    """Solve a (possibly rectangular) linear system by Gauss-Jordan elimination.

    Uses partial pivoting: for each unknown, the remaining equation with the
    largest coefficient magnitude becomes the pivot. Unknowns whose best pivot
    is below tolerance are free and fixed at zero. Equations left over after
    all pivots are ignored, so an inconsistent system yields a least-effort
    answer rather than an error.

    Args:
        matrix: Coefficients, one row per equation
        rhs: Right-hand side, one value per equation
        tolerance: Smallest usable pivot magnitude

    Returns:
        One value per unknown (column of matrix)
    """
    num_eqs = len(matrix)
    num_unknowns = len(matrix[0]) if num_eqs else 0
    aug = [[float(v) for v in row] + [float(rhs[i])] for i, row in enumerate(matrix)]

    pivot_cols: list[int] = []
    pivot_row = 0
    for col in range(num_unknowns):
        if pivot_row >= num_eqs:
            break

        best = pivot_row
        for r in range(pivot_row + 1, num_eqs):
            if abs(aug[r][col]) > abs(aug[best][col]):
                best = r
        if abs(aug[best][col]) < tolerance:
            continue

        aug[pivot_row], aug[best] = aug[best], aug[pivot_row]
        pivot = aug[pivot_row][col]
        aug[pivot_row] = [v / pivot for v in aug[pivot_row]]

        for r in range(num_eqs):
            if r == pivot_row:
                continue
            factor = aug[r][col]
            if factor != 0.0:
                aug[r] = [v - factor * p for v, p in zip(aug[r], aug[pivot_row])]

        pivot_cols.append(col)
        pivot_row += 1

    solution = [0.0] * num_unknowns
    for r, col in enumerate(pivot_cols):
        solution[col] = aug[r][num_unknowns]
    return solution


class GameSolver:
    """Solver for two-player zero-sum games using linear programming.

    Example:
        >>> solution = GameSolver([[1.0, -1.0], [-1.0, 1.0]]).solve()
        >>> [round(p, 3) for p in solution.row_strategy]
        [0.5, 0.5]
    """

    def __init__(
        self,
        payoff_matrix: Sequence[Sequence[float]],
        config: SolverConfig | None = None,
    ) -> None:
        """Validate and store the payoff matrix.

        Args:
            payoff_matrix: Row-major payoffs from Row's perspective
            config: Limits and tolerances; defaults to SolverConfig()

        Raises:
            EmptyMatrixError: If there are no rows or no columns
            InconsistentRowsError: If rows have different lengths
        """
        if len(payoff_matrix) == 0:
            raise EmptyMatrixError("Empty payoff matrix")

        num_cols = len(payoff_matrix[0])
        if num_cols == 0:
            raise EmptyMatrixError("Payoff matrix has no columns")

        for i, row in enumerate(payoff_matrix):
            if len(row) != num_cols:
                raise InconsistentRowsError(
                    f"Inconsistent row lengths in payoff matrix: row {i} has {len(row)}, expected {num_cols}"
                )

        self._payoff_matrix = [[float(v) for v in row] for row in payoff_matrix]
        self.num_rows = len(payoff_matrix)
        self.num_cols = num_cols
        self.config = config or SolverConfig()

    @property
    def payoff_matrix(self) -> list[list[float]]:
        """The original (unshifted) payoff matrix."""
        return self._payoff_matrix

    def solve(self) -> GameSolution:
        """Solve the game and return equilibrium strategies for both players.

        Raises:
            UnboundedError, MaxIterationsError: Propagated from Simplex
            InfeasibleError: If the Row indifference system collapses, or if
                neither it nor Row's own LP secures the column LP value
        """
        shift = self._calculate_shift()
        shifted = self._shift_matrix(shift)
        logger.debug(f"Solving {self.num_rows}x{self.num_cols} game with shift {shift}")

        z = self._solve_lp(shifted)
        sum_z = sum(z)
        col_strategy = [zj / sum_z for zj in z]
        shifted_value = 1.0 / sum_z

        row_strategy = self._derive_row_strategy(shifted, z)
        if not self._guarantees(shifted, row_strategy, shifted_value):
            logger.info("Derived row strategy does not certify the game value; solving Row's LP directly")
            row_strategy = self._solve_row_lp()
            if not self._guarantees(shifted, row_strategy, shifted_value):
                raise InfeasibleError(
                    f"Row player's LP does not guarantee the column LP value {shifted_value - shift}"
                )

        game_value = self._calculate_game_value(row_strategy)

        return GameSolution(
            row_strategy=tuple(row_strategy),
            col_strategy=tuple(col_strategy),
            game_value=game_value,
        )

    def expected_payoff(self, row_strategy: Sequence[float], col_strategy: Sequence[float]) -> float:
        """Expected payoff to Row for the given mixed strategies."""
        return expected_payoff(self._payoff_matrix, row_strategy, col_strategy)

    def _calculate_shift(self) -> float:
        """Amount that makes every payoff at least 1."""
        min_val = min(min(row) for row in self._payoff_matrix)
        return max(0.0, 1.0 - min_val)

    def _shift_matrix(self, shift: float) -> list[list[float]]:
        return [[v + shift for v in row] for row in self._payoff_matrix]

    def _solve_lp(self, matrix: list[list[float]]) -> list[float]:
        """Maximize sum(z) subject to matrix @ z <= 1, z >= 0."""
        num_vars = len(matrix[0])
        solver = Simplex(
            [1.0] * num_vars,
            matrix,
            [1.0] * len(matrix),
            max_iterations=self.config.max_iterations,
            tolerance=self.config.pivot_tolerance,
        )
        _, z = solver.solve()
        return z

    def _derive_row_strategy(self, shifted: list[list[float]], z: list[float]) -> list[float]:
        """Row strategy that makes Column indifferent over its active support.

        Raises:
            InfeasibleError: If no column is active or the solution has no
                probability mass left after clamping
        """
        active = [j for j, zj in enumerate(z) if zj > self.config.active_threshold]
        logger.debug(f"Active columns: {active}")

        if not active:
            raise InfeasibleError("No active columns in the column player's solution")

        if len(active) == 1:
            col = active[0]
            best_row = 0
            best_val = shifted[0][col]
            for i in range(1, self.num_rows):
                if shifted[i][col] > best_val:
                    best_val = shifted[i][col]
                    best_row = i
            logger.info(f"Single active column {col}: row player best response is pure row {best_row}")
            strategy = [0.0] * self.num_rows
            strategy[best_row] = 1.0
            return strategy

        j0 = active[0]
        equations = [
            [shifted[i][j0] - shifted[i][jk] for i in range(self.num_rows)]
            for jk in active[1:]
        ]
        equations.append([1.0] * self.num_rows)
        rhs = [0.0] * (len(active) - 1) + [1.0]

        p = gaussian_elimination(equations, rhs, tolerance=self.config.elimination_tolerance)
        p = [max(0.0, pi) for pi in p]
        total = sum(p)
        if total < self.config.normalization_floor:
            raise InfeasibleError("Row indifference system has no probability mass after clamping")
        return [pi / total for pi in p]

    def _guarantees(self, shifted: list[list[float]], row_strategy: list[float], value: float) -> bool:
        """Whether row_strategy secures value against every pure column."""
        slack = self.config.certification_tolerance * max(1.0, abs(value))
        for j in range(self.num_cols):
            payoff = sum(row_strategy[i] * shifted[i][j] for i in range(self.num_rows))
            if payoff < value - slack:
                return False
        return True

    def _solve_row_lp(self) -> list[float]:
        """Solve Row's LP as the Column LP of the transposed, negated game.

        In the game -A^T Row becomes the minimizer, so its strategy is the
        normalized solution of that game's column LP.
        """
        transposed = [[-self._payoff_matrix[i][j] for i in range(self.num_rows)] for j in range(self.num_cols)]
        min_val = min(min(row) for row in transposed)
        shift = max(0.0, 1.0 - min_val)
        y = self._solve_lp([[v + shift for v in row] for row in transposed])
        sum_y = sum(y)
        return [yi / sum_y for yi in y]

    def _calculate_game_value(self, row_strategy: Sequence[float]) -> float:
        """Minimum expected payoff Row's strategy guarantees on the original matrix."""
        return min(
            sum(row_strategy[i] * self._payoff_matrix[i][j] for i in range(self.num_rows))
            for j in range(self.num_cols)
        )
