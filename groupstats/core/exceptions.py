"""
Exception hierarchy for groupstats.

All exceptions inherit from GroupStatsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class GroupStatsError(Exception):
    """Base exception for all groupstats errors."""
    pass


class ValidationError(GroupStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty groups,
    groups with no non-missing values, non-numeric data.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class UnsupportedStatisticError(ValidationError):
    """
    Requested group-difference statistic is not available.

    Attributes:
        name: The identifier that was requested
        valid: The names that would have been accepted
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        valid: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.name = name
        self.valid = valid


class InvalidConfigurationError(ValidationError):
    """
    A configuration parameter is out of range or not recognised.

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class NumericalError(GroupStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateDistributionError(NumericalError):
    """
    Reference distribution cannot be standardised.

    Raised when a null (shuffle) distribution has zero or undefined
    standard deviation, so no z-score can be formed.

    Attributes:
        sd: Standard deviation of the finite null values
        n_finite: Number of finite values the SD was computed from
    """

    def __init__(
        self,
        message: str,
        sd: float | None = None,
        n_finite: int | None = None,
    ):
        super().__init__(message)
        self.sd = sd
        self.n_finite = n_finite
