"""
Significance of an observed value relative to a shuffle distribution.

The default method z-scores the observed value against the mean and SD of
the shuffles and reads probabilities off the standard normal CDF:

    z       = (observed - mean(shuffles)) / sd(shuffles)
    p       = 2 * Phi(-|z|)            two-tailed
    q_left  = Phi(z)                   one-tailed, observed unusually small
    q_right = 1 - Phi(z)               one-tailed, observed unusually large

This is a parametric approximation to the permutation distribution, not
the exact tail proportion. An exact p-value of zero is impossible with a
finite number of shuffles, so any probability that underflows to zero is
reported as 1 / (number of shuffles). A NaN or infinite observed value
gives NaN p-values.

The "empirical" method keeps the same z but takes one-tailed p-values
from the shuffle tails with the add-one correction (count + 1) / (N + 1),
and the two-tailed p-value as twice the smaller tail, capped at 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from groupstats.core.exceptions import DegenerateDistributionError, DimensionError
from groupstats.core.validation import check_array, check_choice

VALID_METHODS = ("normal", "empirical")


@dataclass(frozen=True)
class ZProbability:
    """
    z-score and p-values for one or more observed values.

    Scalars when a single observed value was evaluated, otherwise arrays
    of shape (M,).
    """
    z: Any
    p: Any
    q_left: Any
    q_right: Any
    n_excluded: int = 0         # non-finite shuffle values left out
    n_single: int = 0           # columns with a single finite shuffle

    @property
    def q(self) -> tuple[Any, Any]:
        """(left, right) one-tailed p-values."""
        return self.q_left, self.q_right


def _null_moments(null: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    """Column-wise mean, SD (ddof=1) and count over finite values."""
    finite = np.isfinite(null)
    n = finite.sum(axis=0)
    filled = np.where(finite, null, 0.0)
    mean = filled.sum(axis=0) / np.maximum(n, 1)
    resid = np.where(finite, null - mean, 0.0)
    var = (resid ** 2).sum(axis=0) / np.maximum(n - 1, 1)
    sd = np.where(n > 1, np.sqrt(var), np.nan)
    return mean, sd, n


def _floor_zero(prob: NDArray, floor: float) -> NDArray:
    return np.where(prob == 0.0, floor, prob)


def evaluate(
    observed: NDArray,
    null: NDArray,
    method: str = "normal",
) -> ZProbability:
    """
    Evaluate observed values against shuffles, column by column.

    Args:
        observed: shape (M,)
        null: shape (N, M), one column of shuffles per observed value
        method: "normal" or "empirical"

    Raises:
        DegenerateDistributionError: If a column has zero SD over two or
            more finite shuffles, or no finite shuffle at all
    """
    mean, sd, n = _null_moments(null)

    # A single finite shuffle carries no spread estimate: z is undefined
    # and p-values are reported as 1. Zero spread over two or more
    # shuffles, or no finite shuffle at all, is an error.
    single = n == 1
    bad = ~single & ~(sd > 0)
    if np.any(bad):
        col = int(np.flatnonzero(bad)[0])
        raise DegenerateDistributionError(
            f"shuffle distribution has zero or undefined standard deviation "
            f"(sd={float(sd[col])} over {int(n[col])} finite values); "
            f"cannot compute a z-score",
            sd=float(sd[col]),
            n_finite=int(n[col]),
        )

    with np.errstate(invalid='ignore'):
        z = np.where(single, np.nan, (observed - mean) / np.where(single, 1.0, sd))
    floor = 1.0 / null.size

    if method == "normal":
        p = _floor_zero(2.0 * sp_stats.norm.cdf(-np.abs(z)), floor)
        q_left = _floor_zero(sp_stats.norm.cdf(z), floor)
        q_right = _floor_zero(sp_stats.norm.sf(z), floor)
    else:
        finite = np.isfinite(null)
        below = np.sum(finite & (null <= observed), axis=0)
        above = np.sum(finite & (null >= observed), axis=0)
        q_left = (below + 1.0) / (n + 1.0)
        q_right = (above + 1.0) / (n + 1.0)
        p = np.minimum(1.0, 2.0 * np.minimum(q_left, q_right))

    p = np.where(single, 1.0, p)
    q_left = np.where(single, 1.0, q_left)
    q_right = np.where(single, 1.0, q_right)

    # An undefined observed value has no tail position under either method
    undefined = ~np.isfinite(observed)
    p = np.where(undefined, np.nan, p)
    q_left = np.where(undefined, np.nan, q_left)
    q_right = np.where(undefined, np.nan, q_right)

    n_excluded = int(null.size - n.sum())
    return ZProbability(
        z=z,
        p=p,
        q_left=q_left,
        q_right=q_right,
        n_excluded=n_excluded,
        n_single=int(single.sum()),
    )


def z_probability(
    observed: ArrayLike,
    null: ArrayLike,
    *,
    method: str = "normal",
) -> ZProbability:
    """
    z-score and p-values of observed value(s) relative to shuffles.

    Parameters
    ----------
    observed : float or array-like, shape (M,)
        Observed value(s).
    null : array-like, shape (N,) or (N, M)
        Shuffle results. Rows are shuffles, columns correspond to the
        observed values. NaN and Inf are treated as missing.
    method : str
        "normal" (default) or "empirical".

    Returns
    -------
    ZProbability
        Scalars for a scalar observed value, otherwise arrays of shape (M,).

    Raises
    ------
    DimensionError
        If the number of columns does not match the observed values.
    DegenerateDistributionError
        If the shuffles have zero variance.

    Examples
    --------
    >>> import numpy as np
    >>> rng = np.random.default_rng(1)
    >>> res = z_probability(2.0, rng.standard_normal(1000))
    >>> round(float(res.z))
    2
    """
    check_choice(method, VALID_METHODS, "method")
    obs_arr = check_array(observed, "observed")
    null_arr = check_array(null, "null")
    scalar = obs_arr.ndim == 0

    obs_arr = np.atleast_1d(obs_arr).astype(np.float64)
    if obs_arr.ndim != 1:
        raise DimensionError(
            f"observed: expected a scalar or 1D array, got shape {obs_arr.shape}"
        )
    if null_arr.ndim == 1:
        null_arr = null_arr.reshape(-1, 1)
    if null_arr.ndim != 2:
        raise DimensionError(
            f"null: expected a 1D or 2D array, got shape {null_arr.shape}"
        )
    if null_arr.shape[1] != obs_arr.shape[0]:
        raise DimensionError(
            f"inputs do not match in size: {obs_arr.shape[0]} observed "
            f"values but {null_arr.shape[1]} shuffle columns given"
        )
    if null_arr.shape[0] < 1:
        raise DimensionError("null: requires at least 1 shuffle, got 0")

    res = evaluate(obs_arr, null_arr.astype(np.float64), method)
    if scalar:
        return ZProbability(
            z=float(res.z[0]),
            p=float(res.p[0]),
            q_left=float(res.q_left[0]),
            q_right=float(res.q_right[0]),
            n_excluded=res.n_excluded,
            n_single=res.n_single,
        )
    return res
