"""Labeled payoff matrices for two-player games.

In the penalty-kick setting:
- Rows are the kicker's strategies
- Columns are the goalkeeper's strategies
- Values are scoring probabilities from the kicker's perspective

Success probabilities live on [0, 1]. The zero-sum payoff used by the solver
maps a goal to +1 and a save to -1, so p becomes 2p - 1 on [-1, 1].
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class PayoffError(ValueError):
    """Invalid payoff matrix data (shape mismatch or bad probability)."""


@dataclass(frozen=True)
class PayoffMatrix:
    """Payoff values with display labels for both players.

    An empty matrix (no rows) is allowed and needs no labels. Otherwise the
    matrix must be rectangular with one label per row and per column.
    """

    values: tuple[tuple[float, ...], ...]
    row_labels: tuple[str, ...]
    col_labels: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate shape and label counts."""
        if not self.values:
            return

        num_cols = len(self.values[0])
        for i, row in enumerate(self.values):
            if len(row) != num_cols:
                raise PayoffError(f"Matrix dimensions mismatch: row {i} has {len(row)} values, expected {num_cols}")

        if len(self.row_labels) != len(self.values) or len(self.col_labels) != num_cols:
            raise PayoffError(
                f"Matrix dimensions mismatch: {len(self.values)}x{num_cols} values with "
                f"{len(self.row_labels)} row labels and {len(self.col_labels)} column labels"
            )

    @classmethod
    def create(
        cls,
        values: Sequence[Sequence[float]],
        row_labels: Sequence[str],
        col_labels: Sequence[str],
    ) -> PayoffMatrix:
        """Build a matrix from any nested sequences."""
        return cls(
            values=tuple(tuple(float(v) for v in row) for row in values),
            row_labels=tuple(row_labels),
            col_labels=tuple(col_labels),
        )

    @classmethod
    def from_success_rates(cls, success_rates: Sequence[Sequence[float]]) -> PayoffMatrix:
        """Create a matrix from raw success probabilities with generated labels.

        Args:
            success_rates: 2D array of goal probabilities (0.0 to 1.0)

        Raises:
            PayoffError: If any value lies outside [0, 1] or rows are ragged
        """
        for row in success_rates:
            for prob in row:
                if not 0.0 <= prob <= 1.0:
                    raise PayoffError(f"Invalid probability: {prob}")

        num_rows = len(success_rates)
        num_cols = len(success_rates[0]) if num_rows > 0 else 0

        return cls.create(
            success_rates,
            [f"Row {i}" for i in range(num_rows)],
            [f"Col {j}" for j in range(num_cols)],
        )

    @property
    def num_rows(self) -> int:
        """Number of Row player strategies."""
        return len(self.values)

    @property
    def num_cols(self) -> int:
        """Number of Column player strategies."""
        return len(self.values[0]) if self.values else 0

    def get(self, row: int, col: int) -> float | None:
        """Payoff for a strategy combination, or None when out of range."""
        if not (0 <= row < self.num_rows and 0 <= col < self.num_cols):
            return None
        return self.values[row][col]

    def to_lists(self) -> list[list[float]]:
        return [list(row) for row in self.values]

    def to_expected_payoff(self) -> list[list[float]]:
        """Convert success probabilities to zero-sum payoffs (goal = +1, save = -1)."""
        return [[2.0 * prob - 1.0 for prob in row] for row in self.values]
