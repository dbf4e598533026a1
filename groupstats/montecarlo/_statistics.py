"""
Group-difference statistics for permutation testing.

Each statistic is fn(a, b) -> float: pure, deterministic, NaN excluded at
the point of computation. Sign convention follows group order, so a
negative mean difference means b has the larger mean.

The registry is closed. Adding a statistic means adding one function and
one entry in STATISTICS.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from groupstats.core.exceptions import UnsupportedStatisticError
from groupstats.descriptive._missing import drop_missing
from groupstats.effectsize._effect_size import (
    cohen_d,
    hedge_g,
    cliff_delta,
    probability_of_superiority,
)

StatisticFn = Callable[[NDArray, NDArray], float]


def mean_difference(a: NDArray, b: NDArray) -> float:
    """mean(a) - mean(b), ignoring NaN."""
    a = drop_missing(a)
    b = drop_missing(b)
    if a.size == 0 or b.size == 0:
        return np.nan
    return float(np.mean(a) - np.mean(b))


def median_difference(a: NDArray, b: NDArray) -> float:
    """median(a) - median(b), ignoring NaN."""
    a = drop_missing(a)
    b = drop_missing(b)
    if a.size == 0 or b.size == 0:
        return np.nan
    return float(np.median(a) - np.median(b))


def _has_within_group_spread(a: NDArray, b: NDArray) -> bool:
    """True when the pooled within-group sum of squares is positive."""
    if a.size == 0 or b.size == 0 or a.size + b.size < 3:
        return False
    return bool(np.ptp(a) > 0 or np.ptp(b) > 0)


def t_statistic(a: NDArray, b: NDArray) -> float:
    """
    Pooled-variance (Student) two-sample t statistic.

    Equal variances are assumed. NaN when there is no within-group spread.
    """
    a = drop_missing(a)
    b = drop_missing(b)
    if not _has_within_group_spread(a, b):
        return np.nan
    return float(sp_stats.ttest_ind(a, b, equal_var=True).statistic)


def f_statistic(a: NDArray, b: NDArray) -> float:
    """
    One-way ANOVA F with group membership as a two-level factor.

    Equals t**2 for two groups. NaN when there is no within-group spread.
    """
    a = drop_missing(a)
    b = drop_missing(b)
    if not _has_within_group_spread(a, b):
        return np.nan
    return float(sp_stats.f_oneway(a, b).statistic)


STATISTICS: Mapping[str, StatisticFn] = MappingProxyType({
    "mean": mean_difference,
    "median": median_difference,
    "t": t_statistic,
    "f": f_statistic,
    "cohen": cohen_d,
    "hedge": hedge_g,
    "cliff": cliff_delta,
    "p_super": probability_of_superiority,
})

VALID_STATISTICS: tuple[str, ...] = tuple(STATISTICS)


def get_statistic(statistic: str | StatisticFn) -> StatisticFn:
    """
    Resolve a statistic name to its function.

    Callables are passed through unchanged so user-defined statistics
    fn(a, b) -> float can be tested too.

    Raises:
        UnsupportedStatisticError: If the name is not registered.
    """
    if callable(statistic):
        return statistic
    try:
        return STATISTICS[statistic]
    except (KeyError, TypeError):
        raise UnsupportedStatisticError(
            f"Unsupported statistic {statistic!r}. "
            f"Choose from: {', '.join(VALID_STATISTICS)}",
            name=statistic,
            valid=VALID_STATISTICS,
        ) from None


def statistic_name(statistic: str | StatisticFn) -> str:
    """Display name: the registry key, or the function's __name__."""
    if isinstance(statistic, str):
        return statistic
    return getattr(statistic, "__name__", repr(statistic))
