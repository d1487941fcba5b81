"""Penalty kicks as a two-player zero-sum game.

The kicker (Row) picks a direction to shoot; the goalkeeper (Column) picks a
direction to dive. Each cell holds the kicker's scoring probability. The
solver works on zero-sum payoffs (goal = +1, save = -1), so the equilibrium
value v maps back to a goal probability (v + 1) / 2.

Default data: Palacios-Huerta (2003) empirical penalty statistics.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from penalty_nash.config import SolverConfig
from penalty_nash.models.payoff import PayoffMatrix
from penalty_nash.parameters import DISPLAY_PROBABILITY_FLOOR
from penalty_nash.solver.game import GameSolver, expected_payoff

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_RATES: tuple[tuple[float, float, float], ...] = (
    # GK dives: Left, Center, Right
    (0.58, 0.93, 0.95),  # Kick Left
    (0.83, 0.44, 0.83),  # Kick Center
    (0.93, 0.90, 0.60),  # Kick Right
)

KICKER_LABELS = ("Kick Left", "Kick Center", "Kick Right")
GOALKEEPER_LABELS = ("GK Left", "GK Center", "GK Right")


class Direction(Enum):
    """Direction of a kick or a dive; the value is the matrix index."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2

    @classmethod
    def all(cls) -> tuple[Direction, ...]:
        return (cls.LEFT, cls.CENTER, cls.RIGHT)

    @classmethod
    def from_index(cls, index: int) -> Direction | None:
        """Direction for a matrix index, or None outside 0..2."""
        for direction in cls:
            if direction.value == index:
                return direction
        return None

    @property
    def index(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()


def _label_strategy(probabilities: Sequence[float]) -> tuple[tuple[Direction, float], ...]:
    pairs = []
    for i, prob in enumerate(probabilities):
        direction = Direction.from_index(i)
        if direction is not None:
            pairs.append((direction, prob))
    return tuple(pairs)


def _format_strategy(strategy: Sequence[tuple[Direction, float]]) -> str:
    return ", ".join(
        f"{direction.label}: {prob * 100:.1f}%"
        for direction, prob in strategy
        if prob > DISPLAY_PROBABILITY_FLOOR
    )


@dataclass(frozen=True)
class PenaltyAnalysis:
    """Equilibrium of a penalty-kick scenario.

    Attributes:
        kicker_strategy: (Direction, probability) pairs for the kicker
        goalkeeper_strategy: (Direction, probability) pairs for the goalkeeper
        goal_probability: Scoring probability at equilibrium
        payoff_matrix: Success-rate matrix that was solved
    """

    kicker_strategy: tuple[tuple[Direction, float], ...]
    goalkeeper_strategy: tuple[tuple[Direction, float], ...]
    goal_probability: float
    payoff_matrix: PayoffMatrix

    def kicker_strategy_string(self) -> str:
        """Kicker's strategy as "Left: 40.0%, Right: 60.0%"."""
        return _format_strategy(self.kicker_strategy)

    def goalkeeper_strategy_string(self) -> str:
        """Goalkeeper's strategy as "Left: 40.0%, Right: 60.0%"."""
        return _format_strategy(self.goalkeeper_strategy)

    def kicker_probabilities(self) -> list[float]:
        return [prob for _, prob in self.kicker_strategy]

    def goalkeeper_probabilities(self) -> list[float]:
        return [prob for _, prob in self.goalkeeper_strategy]


class PenaltyKick:
    """Penalty-kick game analyzer.

    Usage:
        pk = PenaltyKick.with_default_data()
        analysis = pk.analyze()
        print(analysis.kicker_strategy_string())
        print(f"Goal probability: {analysis.goal_probability:.1%}")
    """

    def __init__(self, success_rates: Sequence[Sequence[float]]) -> None:
        """Create an analyzer for a success-rate matrix.

        Args:
            success_rates: 3x3 scoring probabilities; rows are the kicker's
                direction (Left, Center, Right), columns the goalkeeper's dive

        Raises:
            PayoffError: If a non-empty matrix is not 3x3
        """
        self._payoff_matrix = PayoffMatrix.create(success_rates, KICKER_LABELS, GOALKEEPER_LABELS)

    @classmethod
    def with_default_data(cls) -> PenaltyKick:
        """Analyzer loaded with the Palacios-Huerta (2003) success rates."""
        return cls(DEFAULT_SUCCESS_RATES)

    @property
    def payoff_matrix(self) -> PayoffMatrix:
        return self._payoff_matrix

    def analyze(self, config: SolverConfig | None = None) -> PenaltyAnalysis:
        """Find equilibrium strategies and the equilibrium goal probability.

        Raises:
            SolverError: Any GameSolver failure, unchanged
        """
        payoffs = self._payoff_matrix.to_expected_payoff()
        solution = GameSolver(payoffs, config=config).solve()

        kicker_strategy = _label_strategy(solution.row_strategy)
        goalkeeper_strategy = _label_strategy(solution.col_strategy)

        # Game value is on [-1, 1]; map back to a probability on [0, 1]
        goal_probability = (solution.game_value + 1.0) / 2.0
        logger.debug(f"Penalty equilibrium goal probability: {goal_probability:.4f}")

        return PenaltyAnalysis(
            kicker_strategy=kicker_strategy,
            goalkeeper_strategy=goalkeeper_strategy,
            goal_probability=goal_probability,
            payoff_matrix=self._payoff_matrix,
        )

    def expected_goal_probability(
        self,
        kicker_strategy: Sequence[float],
        goalkeeper_strategy: Sequence[float],
    ) -> float:
        """Scoring probability when both sides play the given mixed strategies."""
        return expected_payoff(self._payoff_matrix.values, kicker_strategy, goalkeeper_strategy)
