"""Classic zero-sum games built from parameters.

This module implements the constructor pattern for textbook zero-sum
matrices. Callers pick a game type and parameters; the constructor validates
the parameters and returns a labeled PayoffMatrix from the Row player's
perspective (Column's payoff is the negation).

Known equilibria (useful as solver fixtures):
- Matching Pennies: both 50-50, value 0
- Rock-Paper-Scissors: both uniform, value 0
- Reconnaissance: Row probes 1/3, Column vigilant 2/3, value -scale/3
- Inspection Duel: Row inspects 1/2, Column complies 1 - cost/(2*scale),
  value -cost/2
"""

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .payoff import PayoffMatrix


class ZeroSumType(Enum):
    """Available classic zero-sum games."""

    MATCHING_PENNIES = "matching_pennies"
    ROCK_PAPER_SCISSORS = "rock_paper_scissors"
    RECONNAISSANCE = "reconnaissance"
    INSPECTION_DUEL = "inspection_duel"


class GameParameters(BaseModel):
    """Parameters for constructing a zero-sum payoff matrix.

    Global constraints:
    - scale > 0
    - 0 < inspection_cost < scale
    """

    model_config = ConfigDict(frozen=True)

    # Magnitude of a win (a loss is -scale)
    scale: float = 1.0

    # Inspection Duel: what inspecting costs the inspector
    inspection_cost: float = 0.3

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("scale must be positive")
        return v

    @field_validator("inspection_cost")
    @classmethod
    def validate_cost_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("inspection_cost must be positive")
        return v

    @model_validator(mode="after")
    def validate_cost_below_scale(self) -> "GameParameters":
        if self.inspection_cost >= self.scale:
            raise ValueError(
                f"inspection_cost must be below scale, got cost={self.inspection_cost}, scale={self.scale}"
            )
        return self


@runtime_checkable
class GameConstructor(Protocol):
    """Protocol for zero-sum game constructors."""

    @staticmethod
    def build(params: GameParameters) -> PayoffMatrix:
        """Build the Row player's payoff matrix from parameters."""
        ...

    @staticmethod
    def validate_params(params: GameParameters) -> None:
        """Raise ValueError if parameters violate game-specific constraints."""
        ...


class MatchingPenniesConstructor:
    """Constructor for Matching Pennies.

    Row wins on a match, Column wins on a mismatch.
    Unique equilibrium: both players 50-50, value 0.
    """

    @staticmethod
    def validate_params(params: GameParameters) -> None:
        """Matching pennies has no specific parameter constraints."""
        pass

    @staticmethod
    def build(params: GameParameters) -> PayoffMatrix:
        MatchingPenniesConstructor.validate_params(params)
        win, lose = params.scale, -params.scale
        return PayoffMatrix.create(
            [[win, lose], [lose, win]],
            ("Heads", "Tails"),
            ("Heads", "Tails"),
        )


class RockPaperScissorsConstructor:
    """Constructor for Rock-Paper-Scissors.

    Symmetric cyclic dominance. Unique equilibrium: uniform, value 0.
    """

    @staticmethod
    def validate_params(params: GameParameters) -> None:
        pass

    @staticmethod
    def build(params: GameParameters) -> PayoffMatrix:
        RockPaperScissorsConstructor.validate_params(params)
        s = params.scale
        return PayoffMatrix.create(
            [
                [0.0, -s, s],  # Rock
                [s, 0.0, -s],  # Paper
                [-s, s, 0.0],  # Scissors
            ],
            ("Rock", "Paper", "Scissors"),
            ("Rock", "Paper", "Scissors"),
        )


class ReconnaissanceConstructor:
    """Constructor for the Reconnaissance game.

    Information game with Row as initiator:
    - Probe + Vigilant = Detected (Row loses)
    - Probe + Project = Success (Row wins)
    - Mask + Vigilant = Stalemate
    - Mask + Project = Exposed (Row loses)

    Unique mixed equilibrium: Row probes 1/3, Column vigilant 2/3.
    """

    @staticmethod
    def validate_params(params: GameParameters) -> None:
        """Reconnaissance has fixed structure."""
        pass

    @staticmethod
    def build(params: GameParameters) -> PayoffMatrix:
        ReconnaissanceConstructor.validate_params(params)
        s = params.scale
        return PayoffMatrix.create(
            [[-s, s], [0.0, -s]],
            ("Probe", "Mask"),
            ("Vigilant", "Project"),
        )


class InspectionDuelConstructor:
    """Constructor for a zero-sum Inspection game.

    Inspector (Row) vs potential cheater (Column):
    - Inspect + Comply: -cost
    - Inspect + Cheat: scale - cost (cheater caught)
    - Trust + Comply: 0
    - Trust + Cheat: -scale (inspector exploited)

    Constraint: 0 < cost < scale, which rules out a saddle point.
    """

    @staticmethod
    def validate_params(params: GameParameters) -> None:
        """Validate 0 < cost < scale (also enforced by GameParameters)."""
        if not 0 < params.inspection_cost < params.scale:
            raise ValueError(
                f"Inspection Duel requires 0 < cost < scale, "
                f"got cost={params.inspection_cost}, scale={params.scale}"
            )

    @staticmethod
    def build(params: GameParameters) -> PayoffMatrix:
        InspectionDuelConstructor.validate_params(params)
        s, cost = params.scale, params.inspection_cost
        return PayoffMatrix.create(
            [[-cost, s - cost], [0.0, -s]],
            ("Inspect", "Trust"),
            ("Comply", "Cheat"),
        )


# Registry of all constructors by game type
CONSTRUCTORS: dict[ZeroSumType, type[GameConstructor]] = {
    ZeroSumType.MATCHING_PENNIES: MatchingPenniesConstructor,
    ZeroSumType.ROCK_PAPER_SCISSORS: RockPaperScissorsConstructor,
    ZeroSumType.RECONNAISSANCE: ReconnaissanceConstructor,
    ZeroSumType.INSPECTION_DUEL: InspectionDuelConstructor,
}


def build_game(game_type: ZeroSumType, params: GameParameters | None = None) -> PayoffMatrix:
    """Build a payoff matrix from type and parameters.

    This is the main entry point for classic game construction.
    Raises ValueError if parameters violate the game type's constraints.
    """
    constructor = CONSTRUCTORS.get(game_type)
    if constructor is None:
        raise ValueError(f"Unknown game type: {game_type}")
    return constructor.build(params or GameParameters())
