"""
Input validation utilities for groupstats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Missing values are NaN; they are allowed unless a check says otherwise
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from groupstats.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidConfigurationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    # Ensure floating point so NaN can mark missing values
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_not_all_missing(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one non-missing (non-NaN) value.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If every value is NaN
    """
    if array.size > 0 and np.all(np.isnan(array)):
        raise ValidationError(
            f"{name}: all {array.size} values are missing (NaN)"
        )


def check_group(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate one group of observations for a two-group comparison.

    A group is a non-empty 1D numeric vector with at least one non-missing
    value. Column and row vectors of shape (n, 1) / (1, n) are flattened.

    Returns:
        A float64 copy of the group

    Raises:
        ValidationError: If the group is empty, all-missing or non-numeric
        DimensionError: If the group is a scalar or a true matrix
    """
    arr = check_array(array, name)
    if arr.ndim == 0:
        raise DimensionError(f"{name}: expected a 1D array, got a scalar")
    if arr.ndim == 2 and 1 in arr.shape:
        arr = arr.ravel()
    check_1d(arr, name)
    check_min_samples(arr, 1, name)
    check_not_all_missing(arr, name)
    return arr.astype(np.float64, copy=True)


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify a configuration value is an integer >= 1.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        InvalidConfigurationError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfigurationError(
            f"{name} must be an integer, got {type(value).__name__} {value!r}",
            parameter=name,
            value=value,
        )
    if value < 1:
        raise InvalidConfigurationError(
            f"{name} must be >= 1, got {value}",
            parameter=name,
            value=value,
        )
    return int(value)


def check_seed(value: Any, name: str = "seed") -> int | None:
    """
    Verify a random seed is None or a non-negative integer.

    Raises:
        InvalidConfigurationError: If value is any other type or negative
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfigurationError(
            f"{name} must be a non-negative integer or None, "
            f"got {type(value).__name__} {value!r}",
            parameter=name,
            value=value,
        )
    if value < 0:
        raise InvalidConfigurationError(
            f"{name} must be >= 0, got {value}",
            parameter=name,
            value=value,
        )
    return int(value)


def check_choice(value: Any, choices: tuple[str, ...], name: str) -> str:
    """
    Verify a configuration value is one of a fixed set of strings.

    Raises:
        InvalidConfigurationError: If value is not in choices
    """
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise InvalidConfigurationError(
            f"{name} must be one of {allowed}, got {value!r}",
            parameter=name,
            value=value,
        )
    return value
