"""Tests for the tableau Simplex solver.

Tests cover:
1. Textbook maximization problems with known optima
2. Tableau construction (identity slack block, negated objective)
3. Dimension validation
4. Unbounded problems and the iteration cap
5. Degenerate pivots and solution extraction edge cases
"""

import pytest

from penalty_nash.solver.errors import (
    DimensionError,
    InvalidDimensionsError,
    MaxIterationsError,
    SolverError,
    UnboundedError,
)
from penalty_nash.solver.simplex import Simplex


# =============================================================================
# Known Optima
# =============================================================================


class TestKnownOptima:
    """LPs with hand-checked optimal solutions."""

    def test_simple_maximization(self) -> None:
        """Maximize 3x + 2y s.t. x + y <= 4, x <= 2, y <= 3 -> 10 at (2, 2)."""
        solver = Simplex([3.0, 2.0], [[1.0, 1.0], [1.0, 0.0], [0.0, 1.0]], [4.0, 2.0, 3.0])
        optimal, solution = solver.solve()

        assert optimal == pytest.approx(10.0, abs=1e-6)
        assert solution[0] == pytest.approx(2.0, abs=1e-6)
        assert solution[1] == pytest.approx(2.0, abs=1e-6)

    def test_another_lp(self) -> None:
        """Maximize 5x + 4y s.t. x + y <= 5, 10x + 6y <= 45 -> 23.75 at (3.75, 1.25)."""
        solver = Simplex([5.0, 4.0], [[1.0, 1.0], [10.0, 6.0]], [5.0, 45.0])
        optimal, solution = solver.solve()

        assert optimal == pytest.approx(23.75, abs=1e-6)
        assert solution[0] == pytest.approx(3.75, abs=1e-6)
        assert solution[1] == pytest.approx(1.25, abs=1e-6)

    def test_pivot_count(self) -> None:
        """Both textbook problems reach optimality in two pivots."""
        solver = Simplex([5.0, 4.0], [[1.0, 1.0], [10.0, 6.0]], [5.0, 45.0])
        solver.solve()
        assert solver.iterations == 2

    def test_already_optimal(self) -> None:
        """Non-positive objective coefficients are optimal at the origin."""
        solver = Simplex([-1.0, -2.0], [[1.0, 1.0]], [3.0])
        optimal, solution = solver.solve()

        assert optimal == 0.0
        assert solution == [0.0, 0.0]
        assert solver.iterations == 0

    def test_integer_inputs_accepted(self) -> None:
        """Integer coefficients behave like floats."""
        optimal, solution = Simplex([1, 1], [[1, 0], [0, 1]], [2, 3]).solve()
        assert optimal == pytest.approx(5.0)
        assert solution == pytest.approx([2.0, 3.0])


# =============================================================================
# Tableau Construction
# =============================================================================


class TestTableau:
    """Tests for the initial tableau layout."""

    def test_shape(self) -> None:
        """Tableau has (m + 1) rows and (n + m + 1) columns."""
        solver = Simplex([1.0, 2.0, 3.0], [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]], [1.0, 1.0])
        assert len(solver.tableau) == 3
        assert all(len(row) == 6 for row in solver.tableau)

    def test_layout(self) -> None:
        """Original columns, identity slack block, RHS, negated objective row."""
        solver = Simplex([3.0, 2.0], [[1.0, 1.0], [1.0, 0.0]], [4.0, 2.0])
        assert solver.tableau == [
            [1.0, 1.0, 1.0, 0.0, 4.0],
            [1.0, 0.0, 0.0, 1.0, 2.0],
            [-3.0, -2.0, 0.0, 0.0, 0.0],
        ]

    def test_tableau_mutated_by_solve(self) -> None:
        """Solving leaves the optimal value in the bottom-right cell."""
        solver = Simplex([3.0, 2.0], [[1.0, 1.0], [1.0, 0.0], [0.0, 1.0]], [4.0, 2.0, 3.0])
        solver.solve()
        assert solver.tableau[-1][-1] == pytest.approx(10.0)


# =============================================================================
# Dimension Validation
# =============================================================================


class TestDimensions:
    """Malformed inputs are rejected at construction."""

    def test_rhs_length_mismatch(self) -> None:
        with pytest.raises(InvalidDimensionsError):
            Simplex([1.0, 1.0], [[1.0, 1.0]], [1.0, 2.0])

    def test_row_length_mismatch(self) -> None:
        with pytest.raises(InvalidDimensionsError) as exc_info:
            Simplex([1.0, 1.0], [[1.0, 1.0], [1.0]], [1.0, 2.0])
        assert "row 1" in str(exc_info.value)

    def test_dimension_error_is_value_error(self) -> None:
        """Shape errors are also ValueErrors and SolverErrors."""
        with pytest.raises(ValueError):
            Simplex([1.0], [[1.0, 2.0]], [1.0])
        assert issubclass(InvalidDimensionsError, DimensionError)
        assert issubclass(InvalidDimensionsError, SolverError)


# =============================================================================
# Failure Modes
# =============================================================================


class TestFailures:
    """Unbounded problems and iteration budget."""

    def test_unbounded(self) -> None:
        """Maximize x s.t. -x <= 1 has no leaving row."""
        with pytest.raises(UnboundedError):
            Simplex([1.0], [[-1.0]], [1.0]).solve()

    def test_unbounded_without_constraints(self) -> None:
        with pytest.raises(UnboundedError):
            Simplex([1.0], [], []).solve()

    def test_max_iterations(self) -> None:
        """A two-pivot problem cannot finish with a budget of one."""
        solver = Simplex(
            [3.0, 2.0],
            [[1.0, 1.0], [1.0, 0.0], [0.0, 1.0]],
            [4.0, 2.0, 3.0],
            max_iterations=1,
        )
        with pytest.raises(MaxIterationsError) as exc_info:
            solver.solve()
        assert exc_info.value.iterations == 1
        assert "Maximum iterations exceeded" in str(exc_info.value)


# =============================================================================
# Degeneracy and Extraction
# =============================================================================


class TestDegeneracy:
    """Zero-ratio pivots and basic-variable detection."""

    def test_degenerate_pivot_accepted(self) -> None:
        """A zero right-hand side produces a zero-ratio pivot that is taken."""
        solver = Simplex([1.0, 1.0], [[1.0, 0.0], [0.0, 1.0]], [0.0, 1.0])
        optimal, solution = solver.solve()

        assert optimal == pytest.approx(1.0)
        assert solution == pytest.approx([0.0, 1.0])
        assert solver.iterations == 2

    def test_leftmost_entering_column_on_tie(self) -> None:
        """Equal objective coefficients: the leftmost column enters first."""
        solver = Simplex([1.0, 1.0], [[1.0, 1.0]], [1.0])
        optimal, solution = solver.solve()

        assert optimal == pytest.approx(1.0)
        assert solution == pytest.approx([1.0, 0.0])

    def test_duplicate_columns_share_no_row(self) -> None:
        """Identical columns: only the first takes the basic row."""
        solver = Simplex([2.0, 2.0], [[2.0, 2.0], [2.0, 2.0]], [1.0, 1.0])
        optimal, solution = solver.solve()

        assert optimal == pytest.approx(1.0)
        assert solution == pytest.approx([0.5, 0.0])

    @pytest.mark.parametrize("residue", [-0.0, -1e-17])
    def test_negative_zero_rhs_row_can_leave(self, residue: float) -> None:
        """Round-off below zero in the RHS still makes a row eligible to leave."""
        solver = Simplex([1.0, 1.0], [[1.0, 0.0], [0.0, 1.0]], [1.0, 1.0])
        solver.tableau[1][-1] = residue

        optimal, solution = solver.solve()

        assert optimal == pytest.approx(1.0)
        assert solution == pytest.approx([1.0, 0.0], abs=1e-12)
        assert solver.iterations == 2
