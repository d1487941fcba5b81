"""Payoff matrix models.

This module exports the labeled payoff matrix and the classic zero-sum game
constructors.
"""

from .matrices import (
    CONSTRUCTORS,
    GameConstructor,
    GameParameters,
    InspectionDuelConstructor,
    MatchingPenniesConstructor,
    ReconnaissanceConstructor,
    RockPaperScissorsConstructor,
    ZeroSumType,
    build_game,
)
from .payoff import PayoffError, PayoffMatrix

__all__ = [
    # Payoff matrix
    "PayoffMatrix",
    "PayoffError",
    # Classic games
    "ZeroSumType",
    "GameParameters",
    "GameConstructor",
    "MatchingPenniesConstructor",
    "RockPaperScissorsConstructor",
    "ReconnaissanceConstructor",
    "InspectionDuelConstructor",
    "CONSTRUCTORS",
    "build_game",
]
