"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides a printable report.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from groupstats.core.result import Result
from groupstats.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from groupstats.hypothesis.design import PropTestDesign


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. All standard fields are available as
    properties; summary() gives a full report and text_result a one-line
    form for figure titles.
    """
    _result: Result[HTestParams]
    _design: 'PropTestDesign | None'

    # --- Standard fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float] | None:
        """Distribution parameters (e.g. {'df': 1})."""
        return self._result.params.parameter

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def conf_int(self) -> NDArray[np.floating[Any]] | None:
        """Confidence interval, shape (2,)."""
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def estimate(self) -> dict[str, float] | None:
        """Point estimate(s)."""
        return self._result.params.estimate

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def extras(self) -> dict[str, Any] | None:
        return self._result.params.extras

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

    # --- Formatting ---

    @property
    def text_result(self) -> str:
        """
        Compact result for figure annotations, e.g. "X^2 = 5.1, p = .024".

        The leading zero of the p-value is dropped (APA style).
        """
        p = self._result.params
        if math.isnan(p.p_value):
            p_str = "NaN"
        else:
            p_str = f"{p.p_value:.2g}".replace("0.", ".", 1)
        return f"X^2 = {p.statistic:.1f}, p = {p_str}"

    def summary(self) -> str:
        """
        Format as a test report.

        Produces output like:
            N-1 chi-squared test for two independent proportions

        data:  40 out of 100 and 25 out of 100
        X-squared = 5.1026, df = 1, p-value = 0.02389
        95 percent confidence interval:
         0.02185  0.27815
        sample estimates:
                prop 1         prop 2     difference
                   0.4           0.25           0.15
        """
        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]

        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        if p.parameter is not None:
            for name, val in p.parameter.items():
                parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        if p.conf_int is not None:
            pct = round(p.conf_level * 100, 4)
            lines.append(f"{pct:g} percent confidence interval:")
            lo, hi = p.conf_int
            lines.append(f" {lo:.7g}  {hi:.7g}")

        if p.estimate is not None:
            lines.append("sample estimates:")
            names = list(p.estimate.keys())
            vals = list(p.estimate.values())
            lines.append(" ".join(f"{n:>14s}" for n in names))
            lines.append(" ".join(f"{v:14.7g}" for v in vals))

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if math.isnan(p):
        return "NaN"
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
