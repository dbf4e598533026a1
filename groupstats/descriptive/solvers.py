"""
Descriptive helpers that ignore missing values.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from groupstats.core.validation import check_array


def sem(x: ArrayLike, axis: int | None = 0) -> NDArray[np.floating[Any]] | float:
    """
    Standard error of the mean, ignoring NaN.

    ``nanstd(x, ddof=1) / sqrt(n)`` where ``n`` counts the non-missing
    values along ``axis``. Slices with fewer than two values give NaN.

    Parameters
    ----------
    x : array-like
        Numeric data, may contain NaN.
    axis : int or None
        Axis along which to compute. Default 0 (column-wise for 2D).
        None flattens the input.

    Returns
    -------
    float or NDArray
        Scalar for 1D input or axis=None, otherwise one value per slice.
    """
    arr = check_array(x, "x")
    if arr.ndim == 0:
        arr = arr.reshape(1)

    n = np.sum(~np.isnan(arr), axis=axis)
    with np.errstate(divide='ignore', invalid='ignore'):
        sd = _nanstd_ddof1(arr, axis)
        out = sd / np.sqrt(n)

    if np.ndim(out) == 0:
        return float(out)
    return out


def _nanstd_ddof1(arr: NDArray, axis: int | None) -> NDArray | float:
    """nanstd with ddof=1 that returns NaN (no RuntimeWarning) for n < 2."""
    n = np.sum(~np.isnan(arr), axis=axis)
    mean = np.nansum(arr, axis=axis, keepdims=True) / np.maximum(
        np.sum(~np.isnan(arr), axis=axis, keepdims=True), 1
    )
    ss = np.nansum((arr - mean) ** 2, axis=axis)
    return np.where(n > 1, np.sqrt(ss / np.maximum(n - 1, 1)), np.nan)
