"""Penalty-kick domain wrapper around the zero-sum game solver."""

from penalty_nash.football.penalty import (
    DEFAULT_SUCCESS_RATES,
    Direction,
    PenaltyAnalysis,
    PenaltyKick,
)

__all__ = [
    "DEFAULT_SUCCESS_RATES",
    "Direction",
    "PenaltyAnalysis",
    "PenaltyKick",
]
