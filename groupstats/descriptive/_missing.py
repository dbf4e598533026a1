"""
Missing data handling for group statistics.

Missing values are NaN. Location, scale and dominance statistics exclude
them at the point of computation; whether they are also removed from a
resampling pool is decided by the caller (see PermutationDesign.missing).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


VALID_MISSING_POLICIES = ("retain", "omit")


def drop_missing(x: NDArray) -> NDArray:
    """
    Remove NaN entries from a 1D array.

    Parameters
    ----------
    x : NDArray
        1D array, may contain NaN.

    Returns
    -------
    NDArray
        The non-missing values in their original order. ``x`` itself is
        returned when nothing is missing.
    """
    mask = np.isnan(x)
    if not mask.any():
        return x
    return x[~mask]
