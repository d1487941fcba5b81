"""Numeric parameters for the penalty_nash solvers.

This module is the SINGLE SOURCE OF TRUTH for tolerances, iteration caps and
analysis defaults. Everything else reads its defaults from here, usually via
``penalty_nash.config.SolverConfig``.

Parameter Categories:
- Simplex: iteration cap and pivot tolerances
- Game solving: support detection, elimination and normalization thresholds
- Verification: epsilon-Nash tolerance
- Analysis: sensitivity sweep and display defaults

Usage:
    from penalty_nash.parameters import DEFAULT_MAX_ITERATIONS, PIVOT_TOLERANCE

Note: All comparisons use these fixed absolute epsilons rather than relative
tolerances. Badly scaled payoff matrices (entries spanning many orders of
magnitude) should be rescaled by the caller.
"""

# =============================================================================
# SIMPLEX PARAMETERS
# =============================================================================

DEFAULT_MAX_ITERATIONS = 1000
"""Maximum number of pivots before the Simplex gives up.

Current: 1000

Analysis:
    Neither the entering-column rule (most negative coefficient) nor the
    leaving-row rule (first minimum ratio) is anti-cycling. Degenerate
    pivots with a zero ratio are accepted, so a cycling tableau is possible.
    The cap turns that into a MaxIterationsError instead of a hang.

    A 3x3 penalty-kick game needs fewer than 10 pivots. Games with tens of
    strategies stay well below 100.

Tuning:
    - Larger games with many degenerate vertices: raise it
    - Interactive callers that prefer fast failure: lower it
"""

PIVOT_TOLERANCE = 1e-10
"""Minimum pivot-column entry for a row to take part in the ratio test.

Current: 1e-10

Rows whose entry in the entering column is at or below this value are
skipped. If no row qualifies the LP is unbounded.
"""

BASIC_VARIABLE_TOLERANCE = 1e-10
"""Tolerance for reading a unit column out of the final tableau.

Current: 1e-10

A variable is basic when exactly one tableau entry in its column is within
this distance of 1 and all others are within this distance of 0.
"""


# =============================================================================
# GAME SOLVING PARAMETERS
# =============================================================================

ACTIVE_SUPPORT_THRESHOLD = 1e-9
"""Smallest column-LP value that counts a column as part of the support.

Current: 1e-9

Columns with z_j above this value are the columns the minimizing player
mixes over at equilibrium. They define the indifference system for the row
player.
"""

ELIMINATION_PIVOT_TOLERANCE = 1e-12
"""Smallest usable pivot during Gaussian elimination.

Current: 1e-12

A column whose best remaining pivot is smaller is treated as a free variable
and fixed at zero.
"""

NORMALIZATION_FLOOR = 1e-10
"""Smallest acceptable probability mass before renormalization.

Current: 1e-10

After clamping negative noise to zero the row strategy is rescaled to sum to
1. If less mass than this is left, the indifference system has collapsed and
the solve fails as infeasible.
"""

CERTIFICATION_TOLERANCE = 1e-7
"""Slack allowed when certifying a derived row strategy.

Current: 1e-7 (scaled by max(1, |value|))

The derived row strategy must guarantee the column-LP value up to this slack
against every pure column. Otherwise the row player's LP is solved directly.
"""


# =============================================================================
# VERIFICATION PARAMETERS
# =============================================================================

DEFAULT_EPSILON = 0.01
"""Default tolerance for the epsilon-Nash deviation check.

Current: 0.01

A pure deviation must improve the deviating player's payoff by more than
this to reject a candidate equilibrium.
"""


# =============================================================================
# ANALYSIS PARAMETERS
# =============================================================================

DEFAULT_SENSITIVITY_DELTA = 0.05
"""Default perturbation applied to one success rate in a sensitivity sweep.

Current: 0.05 (five percentage points)
"""

DISPLAY_PROBABILITY_FLOOR = 0.001
"""Probabilities at or below this are omitted from strategy strings."""
