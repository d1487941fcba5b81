"""Nash equilibrium wrapper and epsilon-Nash verification.

In a two-player zero-sum game the minimax solution is always a Nash
equilibrium, so finding one is a GameSolver solve. Verification works on any
candidate pair, solved or not: no pure deviation may improve the deviating
player's payoff by more than epsilon.
"""

from __future__ import annotations

from collections.abc import Sequence

from penalty_nash.config import SolverConfig
from penalty_nash.parameters import DEFAULT_EPSILON
from penalty_nash.solver.game import GameSolution, GameSolver, expected_payoff


class NashEquilibrium:
    """Nash equilibrium of a two-player zero-sum game."""

    def __init__(self, solution: GameSolution) -> None:
        self._solution = solution

    @classmethod
    def find(
        cls,
        payoff_matrix: Sequence[Sequence[float]],
        config: SolverConfig | None = None,
    ) -> NashEquilibrium:
        """Solve the game and wrap its equilibrium.

        Raises:
            SolverError: Any GameSolver failure, unchanged
        """
        solution = GameSolver(payoff_matrix, config=config).solve()
        return cls(solution)

    @property
    def row_strategy(self) -> tuple[float, ...]:
        """Equilibrium strategy for the Row player (maximizer)."""
        return self._solution.row_strategy

    @property
    def col_strategy(self) -> tuple[float, ...]:
        """Equilibrium strategy for the Column player (minimizer)."""
        return self._solution.col_strategy

    @property
    def value(self) -> float:
        """Value of the game at equilibrium."""
        return self._solution.game_value

    @property
    def solution(self) -> GameSolution:
        """The underlying GameSolution."""
        return self._solution

    @staticmethod
    def is_epsilon_nash(
        payoff_matrix: Sequence[Sequence[float]],
        row_strategy: Sequence[float],
        col_strategy: Sequence[float],
        epsilon: float = DEFAULT_EPSILON,
    ) -> bool:
        """Check whether a strategy pair is an epsilon-Nash equilibrium.

        Row must not gain more than epsilon by switching to any pure row, and
        Column (the minimizer) must not push the payoff down by more than
        epsilon by switching to any pure column.

        Args:
            payoff_matrix: Payoffs from Row's perspective
            row_strategy: Candidate Row mixed strategy
            col_strategy: Candidate Column mixed strategy
            epsilon: Allowed improvement from a unilateral deviation

        Returns:
            True if no pure deviation beats the candidate by more than epsilon
        """
        num_rows = len(payoff_matrix)
        num_cols = len(payoff_matrix[0])
        current = expected_payoff(payoff_matrix, row_strategy, col_strategy)

        for i in range(num_rows):
            pure = [0.0] * num_rows
            pure[i] = 1.0
            if expected_payoff(payoff_matrix, pure, col_strategy) > current + epsilon:
                return False

        for j in range(num_cols):
            pure = [0.0] * num_cols
            pure[j] = 1.0
            if expected_payoff(payoff_matrix, row_strategy, pure) < current - epsilon:
                return False

        return True
