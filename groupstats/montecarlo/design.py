"""
Design class for permutation testing.

PermutationDesign encapsulates all inputs needed by backends to perform
resampling. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from groupstats.core.validation import (
    check_choice,
    check_group,
    check_positive_int,
    check_seed,
)
from groupstats.descriptive._missing import VALID_MISSING_POLICIES, drop_missing
from groupstats.montecarlo._resample import DEFAULT_SEED
from groupstats.montecarlo._significance import VALID_METHODS
from groupstats.montecarlo._statistics import get_statistic


@dataclass(frozen=True)
class PermutationDesign:
    """
    Frozen design for a two-group permutation z-test.

    Attributes:
        x: Group 1 data, shape (n1,).
        y: Group 2 data, shape (n2,).
        statistic: Registered statistic name or fn(x, y) -> float.
        iterations: Number of shuffles.
        replace: Shuffle with (True) or without (False) replacement.
        seed: Seed for the shuffle generator, applied at the start of
            every run.
        missing: "retain" keeps NaN in the pool (each statistic excludes
            them), "omit" drops NaN from both groups before anything else.
        method: "normal" (z approximation) or "empirical" (tail counts).
    """
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    statistic: str | Callable
    iterations: int
    replace: bool
    seed: int | None
    missing: str
    method: str

    @classmethod
    def for_permutation_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        statistic: str | Callable = "mean",
        iterations: int = 1000,
        *,
        replace: bool = True,
        seed: int | None = DEFAULT_SEED,
        missing: str = "retain",
        method: str = "normal",
    ) -> PermutationDesign:
        """
        Create a permutation test design with validation.

        Args:
            x: Group 1 data.
            y: Group 2 data.
            statistic: "mean", "median", "t", "f", "cohen", "hedge",
                "cliff", "p_super", or a callable fn(x, y) -> float.
            iterations: Number of shuffles. Must be >= 1.
            replace: Sample with replacement. Default True.
            seed: Random seed, a non-negative integer or None. Default 999.
            missing: "retain" (default) or "omit".
            method: "normal" (default) or "empirical".

        Returns:
            Validated PermutationDesign.

        Raises:
            ValidationError: Empty or all-missing group.
            DimensionError: Group is not a vector.
            UnsupportedStatisticError: Unknown statistic name.
            InvalidConfigurationError: Bad iterations, seed, missing or method.
        """
        x_arr = check_group(x, "x")
        y_arr = check_group(y, "y")

        get_statistic(statistic)
        iterations = check_positive_int(iterations, "iterations")
        seed = check_seed(seed, "seed")
        check_choice(missing, VALID_MISSING_POLICIES, "missing")
        check_choice(method, VALID_METHODS, "method")

        if missing == "omit":
            x_arr = drop_missing(x_arr)
            y_arr = drop_missing(y_arr)

        return cls(
            x=x_arr,
            y=y_arr,
            statistic=statistic,
            iterations=iterations,
            replace=bool(replace),
            seed=seed,
            missing=missing,
            method=method,
        )

    @property
    def n_total(self) -> int:
        """Size of the pooled sample."""
        return len(self.x) + len(self.y)
