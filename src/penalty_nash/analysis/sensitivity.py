"""Sensitivity analysis for penalty-kick equilibria.

Perturbs one success rate at a time, re-solves the game and reports how far
both equilibrium strategies and the equilibrium goal probability move. The
cells with the largest total strategy shift are the critical parameters:
small measurement errors there change the recommended play the most.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from penalty_nash.config import SolverConfig
from penalty_nash.football.penalty import DEFAULT_SUCCESS_RATES, PenaltyAnalysis, PenaltyKick
from penalty_nash.parameters import DEFAULT_SENSITIVITY_DELTA

logger = logging.getLogger(__name__)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value to the specified range."""
    return max(min_val, min(max_val, value))


@dataclass(frozen=True)
class SensitivityResult:
    """Effect of changing one success rate.

    Attributes:
        parameter: Human-readable name, e.g. "Success rate [0,2]"
        row: Kick direction index of the changed cell
        col: Dive direction index of the changed cell
        original_value: Success rate before the change
        new_value: Success rate after the change (clamped to [0, 1])
        kicker_strategy_change: Per-direction change in kicker probabilities
        goalkeeper_strategy_change: Per-direction change in goalkeeper probabilities
        goal_probability_change: Change in equilibrium goal probability
    """

    parameter: str
    row: int
    col: int
    original_value: float
    new_value: float
    kicker_strategy_change: tuple[float, ...]
    goalkeeper_strategy_change: tuple[float, ...]
    goal_probability_change: float

    @property
    def total_strategy_change(self) -> float:
        """Sum of absolute probability shifts over both players."""
        return sum(abs(x) for x in self.kicker_strategy_change) + sum(
            abs(x) for x in self.goalkeeper_strategy_change
        )


class SensitivityAnalyzer:
    """Performs sensitivity analysis on penalty-kick success-rate matrices."""

    def __init__(
        self,
        base_matrix: Sequence[Sequence[float]],
        config: SolverConfig | None = None,
    ) -> None:
        self.base_matrix = [list(row) for row in base_matrix]
        self.config = config

    @classmethod
    def with_default_data(cls, config: SolverConfig | None = None) -> SensitivityAnalyzer:
        return cls(DEFAULT_SUCCESS_RATES, config=config)

    def analyze_single_change(self, row: int, col: int, delta: float) -> SensitivityResult:
        """Measure how changing one success rate moves the equilibrium.

        Args:
            row: Kick direction index (0=left, 1=center, 2=right)
            col: Dive direction index
            delta: Amount added to the success rate

        Returns:
            SensitivityResult for the cell

        Raises:
            IndexError: If row or col is outside the matrix
            SolverError: Any failure solving the base or modified game
        """
        return self._compare(self._solve(self.base_matrix), row, col, delta)

    def full_analysis(self, delta: float = DEFAULT_SENSITIVITY_DELTA) -> list[SensitivityResult]:
        """Vary every success rate by delta, row by row."""
        base_analysis = self._solve(self.base_matrix)
        results = []
        for row in range(len(self.base_matrix)):
            for col in range(len(self.base_matrix[row])):
                results.append(self._compare(base_analysis, row, col, delta))
        return results

    def find_critical_parameters(
        self, delta: float = DEFAULT_SENSITIVITY_DELTA
    ) -> list[tuple[int, int, float]]:
        """Cells ranked by total strategy change, largest first.

        Returns:
            List of (row, col, total_change); ties keep row-major order
        """
        critical = [(r.row, r.col, r.total_strategy_change) for r in self.full_analysis(delta)]
        critical.sort(key=lambda item: item[2], reverse=True)
        return critical

    def _solve(self, matrix: Sequence[Sequence[float]]) -> PenaltyAnalysis:
        return PenaltyKick(matrix).analyze(config=self.config)

    def _compare(
        self,
        base_analysis: PenaltyAnalysis,
        row: int,
        col: int,
        delta: float,
    ) -> SensitivityResult:
        modified = [list(r) for r in self.base_matrix]
        original_value = modified[row][col]
        modified[row][col] = clamp(original_value + delta, 0.0, 1.0)
        new_value = modified[row][col]

        modified_analysis = self._solve(modified)
        logger.debug(
            f"Cell [{row},{col}] {original_value} -> {new_value}: goal probability "
            f"{base_analysis.goal_probability:.4f} -> {modified_analysis.goal_probability:.4f}"
        )

        kicker_change = tuple(
            new - old
            for old, new in zip(
                base_analysis.kicker_probabilities(), modified_analysis.kicker_probabilities()
            )
        )
        goalkeeper_change = tuple(
            new - old
            for old, new in zip(
                base_analysis.goalkeeper_probabilities(), modified_analysis.goalkeeper_probabilities()
            )
        )

        return SensitivityResult(
            parameter=f"Success rate [{row},{col}]",
            row=row,
            col=col,
            original_value=original_value,
            new_value=new_value,
            kicker_strategy_change=kicker_change,
            goalkeeper_strategy_change=goalkeeper_change,
            goal_probability_change=modified_analysis.goal_probability - base_analysis.goal_probability,
        )
