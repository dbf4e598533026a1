"""
Core infrastructure for groupstats.

This module provides shared abstractions and utilities used by all
domain-specific submodules (montecarlo, effectsize, hypothesis, descriptive).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from groupstats.core.result import Result
from groupstats.core.exceptions import (
    GroupStatsError,
    ValidationError,
    DimensionError,
    UnsupportedStatisticError,
    InvalidConfigurationError,
    NumericalError,
    DegenerateDistributionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "GroupStatsError",
    "ValidationError",
    "DimensionError",
    "UnsupportedStatisticError",
    "InvalidConfigurationError",
    "NumericalError",
    "DegenerateDistributionError",
]
