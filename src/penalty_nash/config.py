"""Solver configuration for penalty_nash.

This module provides the validated configuration object consumed by the
solvers and a factory that applies environment overrides on top of the
defaults in ``penalty_nash.parameters``.
"""

import os

from pydantic import BaseModel, ConfigDict, field_validator

from .parameters import (
    ACTIVE_SUPPORT_THRESHOLD,
    CERTIFICATION_TOLERANCE,
    DEFAULT_MAX_ITERATIONS,
    ELIMINATION_PIVOT_TOLERANCE,
    NORMALIZATION_FLOOR,
    PIVOT_TOLERANCE,
)

MAX_ITERATIONS_ENV = "PENALTY_NASH_MAX_ITERATIONS"
ACTIVE_THRESHOLD_ENV = "PENALTY_NASH_ACTIVE_THRESHOLD"


class SolverConfig(BaseModel):
    """Tunable limits and tolerances for one solve.

    Defaults mirror penalty_nash.parameters. Instances are immutable so a
    single config can be shared between solvers.
    """

    model_config = ConfigDict(frozen=True)

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    pivot_tolerance: float = PIVOT_TOLERANCE
    active_threshold: float = ACTIVE_SUPPORT_THRESHOLD
    elimination_tolerance: float = ELIMINATION_PIVOT_TOLERANCE
    normalization_floor: float = NORMALIZATION_FLOOR
    certification_tolerance: float = CERTIFICATION_TOLERANCE

    @field_validator("max_iterations")
    @classmethod
    def validate_max_iterations(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_iterations must be positive")
        return v

    @field_validator(
        "pivot_tolerance",
        "active_threshold",
        "elimination_tolerance",
        "normalization_floor",
        "certification_tolerance",
    )
    @classmethod
    def validate_tolerance_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("tolerances must be positive")
        return v


def get_max_iterations() -> int:
    """Get configured iteration cap from environment."""
    raw = os.environ.get(MAX_ITERATIONS_ENV)
    if raw is None:
        return DEFAULT_MAX_ITERATIONS
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{MAX_ITERATIONS_ENV} must be an integer, got {raw!r}") from None


def get_active_threshold() -> float:
    """Get configured support threshold from environment."""
    raw = os.environ.get(ACTIVE_THRESHOLD_ENV)
    if raw is None:
        return ACTIVE_SUPPORT_THRESHOLD
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{ACTIVE_THRESHOLD_ENV} must be a number, got {raw!r}") from None


def get_solver_config() -> SolverConfig:
    """Factory function to create a solver configuration.

    Reads PENALTY_NASH_MAX_ITERATIONS and PENALTY_NASH_ACTIVE_THRESHOLD when
    set; every other field keeps its default.

    Returns:
        SolverConfig instance

    Raises:
        ValueError: If an environment value cannot be parsed
        pydantic.ValidationError: If a parsed value is out of range
    """
    return SolverConfig(
        max_iterations=get_max_iterations(),
        active_threshold=get_active_threshold(),
    )
