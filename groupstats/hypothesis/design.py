"""
Design class for hypothesis tests.

Immutable, validated at construction.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from groupstats.core.exceptions import ValidationError


def _check_size(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value != int(value) or value < 1:
        raise ValidationError(
            f"{name} must be a positive whole number, got {value!r}"
        )
    return int(value)


def _check_percentage(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if not 0.0 <= value <= 100.0:
        raise ValidationError(
            f"{name} must be a percentage in [0, 100], got {value!r}"
        )
    return float(value)


@dataclass(frozen=True)
class PropTestDesign:
    """
    Frozen design for the N-1 chi-squared comparison of two proportions.

    Attributes:
        n1, n2: Group sizes.
        pct1, pct2: Observed percentages (0-100) in each group.
        alpha: Significance level for the confidence interval.
    """
    n1: int
    pct1: float
    n2: int
    pct2: float
    alpha: float

    @classmethod
    def for_prop_test_n1(
        cls,
        n1: int,
        pct1: float,
        n2: int,
        pct2: float,
        *,
        alpha: float = 0.05,
    ) -> PropTestDesign:
        """
        Create a two-proportion test design with validation.

        Raises:
            ValidationError: If sizes are not positive whole numbers,
                percentages fall outside [0, 100], or alpha is not in (0, 1).
        """
        n1 = _check_size(n1, "n1")
        n2 = _check_size(n2, "n2")
        pct1 = _check_percentage(pct1, "pct1")
        pct2 = _check_percentage(pct2, "pct2")

        if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real) \
                or not 0.0 < alpha < 1.0:
            raise ValidationError(f"alpha must be in (0, 1), got {alpha!r}")

        return cls(n1=n1, pct1=pct1, n2=n2, pct2=pct2, alpha=float(alpha))

    @property
    def conf_level(self) -> float:
        return 1.0 - self.alpha
