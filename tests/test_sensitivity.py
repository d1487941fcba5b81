"""Tests for penalty-kick sensitivity analysis."""

import pytest

from penalty_nash.analysis.sensitivity import SensitivityAnalyzer, SensitivityResult, clamp
from penalty_nash.config import SolverConfig
from penalty_nash.solver.errors import MaxIterationsError


class TestAnalyzeSingleChange:
    """One perturbed success rate."""

    def test_sensitivity_analysis(self) -> None:
        analyzer = SensitivityAnalyzer.with_default_data()
        result = analyzer.analyze_single_change(0, 0, 0.1)

        assert result.original_value == 0.58
        assert result.new_value == pytest.approx(0.68, abs=0.001)
        assert result.parameter == "Success rate [0,0]"
        assert (result.row, result.col) == (0, 0)
        assert len(result.kicker_strategy_change) == 3
        assert len(result.goalkeeper_strategy_change) == 3

    def test_changes_keep_distributions(self) -> None:
        """Strategy changes of two distributions sum to zero."""
        result = SensitivityAnalyzer.with_default_data().analyze_single_change(1, 1, 0.1)
        assert sum(result.kicker_strategy_change) == pytest.approx(0.0, abs=1e-6)
        assert sum(result.goalkeeper_strategy_change) == pytest.approx(0.0, abs=1e-6)

    def test_new_value_clamped(self) -> None:
        analyzer = SensitivityAnalyzer.with_default_data()
        assert analyzer.analyze_single_change(0, 2, 0.1).new_value == 1.0
        assert analyzer.analyze_single_change(1, 1, -0.9).new_value == 0.0

    def test_zero_delta_changes_nothing(self) -> None:
        result = SensitivityAnalyzer.with_default_data().analyze_single_change(2, 0, 0.0)
        assert result.total_strategy_change == 0.0
        assert result.goal_probability_change == 0.0

    def test_base_matrix_not_mutated(self, default_success_rates) -> None:
        analyzer = SensitivityAnalyzer(default_success_rates)
        analyzer.analyze_single_change(0, 0, 0.2)
        assert analyzer.base_matrix == default_success_rates

    def test_solver_errors_propagate(self) -> None:
        analyzer = SensitivityAnalyzer.with_default_data(config=SolverConfig(max_iterations=1))
        with pytest.raises(MaxIterationsError):
            analyzer.analyze_single_change(0, 0, 0.1)


class TestFullAnalysis:
    """Sweeps over every cell."""

    def test_full_analysis(self) -> None:
        results = SensitivityAnalyzer.with_default_data().full_analysis(0.05)

        assert len(results) == 9
        assert [(r.row, r.col) for r in results] == [(r, c) for r in range(3) for c in range(3)]
        assert all(isinstance(r, SensitivityResult) for r in results)

    def test_find_critical_parameters(self) -> None:
        critical = SensitivityAnalyzer.with_default_data().find_critical_parameters(0.05)

        assert len(critical) == 9
        changes = [change for _, _, change in critical]
        assert changes == sorted(changes, reverse=True)
        assert {(row, col) for row, col, _ in critical} == {(r, c) for r in range(3) for c in range(3)}


class TestSensitivityResult:
    """Derived totals."""

    def test_total_strategy_change(self) -> None:
        result = SensitivityResult(
            parameter="Success rate [0,0]",
            row=0,
            col=0,
            original_value=0.5,
            new_value=0.6,
            kicker_strategy_change=(0.1, -0.05, -0.05),
            goalkeeper_strategy_change=(-0.2, 0.2, 0.0),
            goal_probability_change=0.01,
        )
        assert result.total_strategy_change == pytest.approx(0.6)

    def test_clamp(self) -> None:
        assert clamp(1.2, 0.0, 1.0) == 1.0
        assert clamp(-0.2, 0.0, 1.0) == 0.0
        assert clamp(0.4, 0.0, 1.0) == 0.4
