"""
Two-group effect sizes.

Follows the narrative of Lakens (2013), "Calculating and reporting effect
sizes to facilitate cumulative science: a practical primer for t-tests and
ANOVAs", https://doi.org/10.3389/fpsyg.2013.00863:

    Cohen's d        mean difference over the Bessel-corrected pooled SD (eq. 1)
    Hedge's g        Cohen's d with the small-sample bias correction (eq. 4)
    Glass's delta    mean difference over the SD of the control group (Table 1)

plus two ordinal (dominance) measures:

    Cliff's delta                 Hess and Kromrey (2004), eq. 3
    Probability of superiority    Ruscio and Gera (2013), eq. 1

Every function takes raw group vectors, excludes NaN, and never raises on
degenerate data: zero spread gives inf or nan. These functions sit inside
the permutation loop, so they stay warning-free and cheap.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from groupstats.descriptive._missing import drop_missing
from groupstats.effectsize._common import EffectSizeParams


def _mean(x: NDArray) -> float:
    return float(np.mean(x)) if x.size else np.nan


def _sd(x: NDArray) -> float:
    """Sample SD (ddof=1); NaN for fewer than two values."""
    if x.size < 2:
        return np.nan
    return float(np.std(x, ddof=1))


def _divide(num: float, den: float) -> float:
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(num) / np.float64(den))


def pooled_sd(a: NDArray, b: NDArray) -> float:
    """
    Pooled standard deviation with Bessel's correction.

    sqrt(((n_a - 1) sd_a^2 + (n_b - 1) sd_b^2) / (n_a + n_b - 2)), on the
    non-missing values of each group. A group with a single value
    contributes no spread.
    """
    a = drop_missing(a)
    b = drop_missing(b)
    return _pooled_sd_clean(a, b)


def _pooled_sd_clean(a: NDArray, b: NDArray) -> float:
    n_a, n_b = a.size, b.size
    ss = 0.0
    if n_a > 1:
        ss += (n_a - 1) * np.var(a, ddof=1)
    if n_b > 1:
        ss += (n_b - 1) * np.var(b, ddof=1)
    return float(np.sqrt(_divide(ss, n_a + n_b - 2)))


def cohen_d(a: NDArray, b: NDArray) -> float:
    """Cohen's d: (mean(a) - mean(b)) / pooled SD."""
    a = drop_missing(a)
    b = drop_missing(b)
    return _divide(_mean(a) - _mean(b), _pooled_sd_clean(a, b))


def hedge_g(a: NDArray, b: NDArray) -> float:
    """Hedge's g: Cohen's d * (1 - 3 / (4 (n_a + n_b) - 9))."""
    a = drop_missing(a)
    b = drop_missing(b)
    d = _divide(_mean(a) - _mean(b), _pooled_sd_clean(a, b))
    return d * _hedge_correction(a.size, b.size)


def _hedge_correction(n_a: int, n_b: int) -> float:
    return 1.0 - 3.0 / (4.0 * (n_a + n_b) - 9.0)


def glass_delta(a: NDArray, b: NDArray) -> float:
    """Glass's delta: (mean(a) - mean(b)) / sd(b); b is the control group."""
    a = drop_missing(a)
    b = drop_missing(b)
    return _divide(_mean(a) - _mean(b), _sd(b))


def _dominance_counts(a: NDArray, b: NDArray) -> tuple[int, int, int]:
    """
    Pairwise dominance counts over all (a_i, b_j).

    Returns (greater, less, ties). Uses a sorted copy of b so the cost is
    O((n_a + n_b) log n_b) instead of materialising the n_a x n_b matrix.
    """
    b_sorted = np.sort(b)
    left = np.searchsorted(b_sorted, a, side='left')
    right = np.searchsorted(b_sorted, a, side='right')
    greater = int(left.sum())
    less = int((b_sorted.size - right).sum())
    ties = a.size * b_sorted.size - greater - less
    return greater, less, ties


def cliff_delta(a: NDArray, b: NDArray) -> float:
    """Cliff's delta: (#(a_i > b_j) - #(a_i < b_j)) / (n_a n_b), in [-1, 1]."""
    a = drop_missing(a)
    b = drop_missing(b)
    greater, less, _ = _dominance_counts(a, b)
    return _divide(greater - less, a.size * b.size)


def probability_of_superiority(a: NDArray, b: NDArray) -> float:
    """Probability of superiority: (#(a_i > b_j) + 0.5 #ties) / (n_a n_b), in [0, 1]."""
    a = drop_missing(a)
    b = drop_missing(b)
    greater, _, ties = _dominance_counts(a, b)
    return _divide(greater + 0.5 * ties, a.size * b.size)


def compute_effect_sizes(
    x: NDArray, y: NDArray,
) -> tuple[EffectSizeParams, list[str]]:
    """
    All effect sizes for x (group 1) against y (group 2, the control).

    Returns the parameter payload and a list of non-fatal warnings.
    """
    warnings_list: list[str] = []
    a = drop_missing(x)
    b = drop_missing(y)
    n_a, n_b = a.size, b.size

    mean_1, mean_2 = _mean(a), _mean(b)
    sd_1, sd_2 = _sd(a), _sd(b)
    mean_diff = mean_1 - mean_2
    df = n_a + n_b - 2
    sd_pooled = _pooled_sd_clean(a, b)

    if df < 1:
        warnings_list.append(
            "fewer than 3 non-missing values in total; pooled SD is undefined"
        )
    elif sd_pooled == 0.0:
        warnings_list.append(
            "pooled standard deviation is zero; Cohen's d and Hedge's g are not finite"
        )
    if not sd_2 > 0.0:
        warnings_list.append(
            "standard deviation of the control group (y) is zero or undefined; "
            "Glass's delta is not finite"
        )

    d = _divide(mean_diff, sd_pooled)
    greater, less, ties = _dominance_counts(a, b)
    n_pairs = n_a * n_b

    params = EffectSizeParams(
        mean_1=mean_1,
        mean_2=mean_2,
        sd_1=sd_1,
        sd_2=sd_2,
        num_1=n_a,
        num_2=n_b,
        mean_diff=mean_diff,
        df=df,
        sd_pooled=sd_pooled,
        cohen_d=d,
        hedge_g=d * _hedge_correction(n_a, n_b),
        glass_delta=_divide(mean_diff, sd_2),
        cliff_delta=_divide(greater - less, n_pairs),
        probability_of_superiority=_divide(greater + 0.5 * ties, n_pairs),
    )
    return params, warnings_list
