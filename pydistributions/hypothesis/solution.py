"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides R's print.htest format.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pydistributions.core.result import Result
from pydistributions.core.validation import check_significance_level
from pydistributions.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from pydistributions.hypothesis.design import HypothesisDesign


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams] and provides R's print.htest output format
    via summary(). All standard htest fields are available as properties.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    # --- Standard htest fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic ('D')."""
        return self._result.params.statistic_name

    @property
    def p_value(self) -> float:
        """p-value of the test."""
        return self._result.params.p_value

    @property
    def alternative(self) -> str:
        """Alternative hypothesis direction."""
        return self._result.params.alternative

    @property
    def method(self) -> str:
        """Human-readable method name."""
        return self._result.params.method

    @property
    def data_name(self) -> str:
        """Description of the data."""
        return self._result.params.data_name

    # --- Test-specific extras ---

    @property
    def extras(self) -> dict[str, Any] | None:
        """Test-specific additional outputs."""
        return self._result.params.extras

    @property
    def algorithm(self) -> str | None:
        """p-value algorithm: 'exact', 'enumerate', 'monte_carlo', 'asymptotic' or 'rounded'."""
        return self._result.info.get('algorithm')

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Decisions ---

    def reject(self, alpha: float = 0.05) -> bool:
        """
        Whether the null hypothesis is rejected at level alpha.

        Parameters
        ----------
        alpha : float
            Significance level in (0, 0.5].

        Returns
        -------
        bool
            True iff p_value < alpha.
        """
        alpha = check_significance_level(alpha)
        return self.p_value < alpha

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as R's print.htest output.

        Produces output like:
            Exact two-sample Kolmogorov-Smirnov test

        data:  x and y
        D = 0.4, p-value = 0.873
        alternative hypothesis: two-sided
        """
        p = self._result.params
        lines = []

        lines.append(f"\t{p.method}")
        lines.append("")

        lines.append(f"data:  {p.data_name}")

        parts = [
            f"{p.statistic_name} = {p.statistic:.5g}",
            f"p-value = {_format_pvalue(p.p_value)}",
        ]
        lines.append(", ".join(parts))

        if p.alternative == "two.sided":
            lines.append("alternative hypothesis: two-sided")
        else:
            lines.append(f"alternative hypothesis: {p.alternative}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, {p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
