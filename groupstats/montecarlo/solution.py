"""
Solution wrapper for permutation test results.

PermutationSolution wraps Result[PermutationParams] and provides
convenient accessors and a readable summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from groupstats.core.result import Result
from groupstats.montecarlo._common import PermutationParams

if TYPE_CHECKING:
    from groupstats.montecarlo.design import PermutationDesign


@dataclass
class PermutationSolution:
    """
    User-facing permutation test results.

    Provides the observed statistic, the shuffle distribution, the z-score
    and two-tailed plus one-tailed p-values.
    """
    _result: Result[PermutationParams]
    _design: 'PermutationDesign'

    # --- Core fields ---

    @property
    def observed(self) -> float:
        """Statistic on the original (unshuffled) groups."""
        return self._result.params.observed

    @property
    def null_distribution(self) -> NDArray[np.floating[Any]]:
        """Shuffle distribution, shape (iterations,)."""
        return self._result.params.null_distribution

    @property
    def z(self) -> float:
        """Observed value z-scored against the shuffle distribution."""
        return self._result.params.z

    @property
    def p_value(self) -> float:
        """Two-tailed p-value."""
        return self._result.params.p_value

    @property
    def q_left(self) -> float:
        """Left one-tailed p-value (observed unusually small)."""
        return self._result.params.q_left

    @property
    def q_right(self) -> float:
        """Right one-tailed p-value (observed unusually large)."""
        return self._result.params.q_right

    @property
    def q(self) -> tuple[float, float]:
        """(left, right) one-tailed p-values."""
        return self.q_left, self.q_right

    @property
    def iterations(self) -> int:
        """Number of shuffles."""
        return self._result.params.iterations

    @property
    def statistic(self) -> str:
        """Name of the group-difference statistic."""
        return self._result.params.statistic

    @property
    def method(self) -> str:
        """How p-values were derived: "normal" or "empirical"."""
        return self._result.params.method

    # --- Metadata ---

    @property
    def replace(self) -> bool:
        """Whether shuffles sampled with replacement."""
        return self._design.replace

    @property
    def seed(self) -> int | None:
        """Random seed used."""
        return self._design.seed

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

    # --- Display ---

    def summary(self) -> str:
        """Permutation test summary."""
        scheme = "with" if self.replace else "without"
        lines = [
            "\nPERMUTATION Z-TEST",
            "",
            f"Statistic: {self.statistic}",
            f"Number of shuffles: {self.iterations} ({scheme} replacement, "
            f"seed={self.seed})",
            f"Observed statistic: {self.observed:.6g}",
            f"z = {self.z:.4f}",
            f"p-value (two-sided, {self.method}): {self.p_value:.4g}",
            f"p-value (one-sided): left = {self.q_left:.4g}, "
            f"right = {self.q_right:.4g}",
            "",
        ]
        for w in self.warnings:
            lines.insert(-1, f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PermutationSolution(statistic={self.statistic!r}, "
            f"iterations={self.iterations}, "
            f"observed={self.observed:.4g}, z={self.z:.4g}, "
            f"p_value={self.p_value:.4g})"
        )
