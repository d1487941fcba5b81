"""Analysis tools built on solved penalty-kick games.

Usage:
    from penalty_nash.analysis import SensitivityAnalyzer

    analyzer = SensitivityAnalyzer.with_default_data()
    for row, col, change in analyzer.find_critical_parameters(0.05)[:3]:
        print(f"[{row},{col}] total strategy change {change:.3f}")
"""

from penalty_nash.analysis.sensitivity import SensitivityAnalyzer, SensitivityResult

__all__ = [
    "SensitivityAnalyzer",
    "SensitivityResult",
]
