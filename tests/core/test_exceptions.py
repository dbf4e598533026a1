"""
Tests for groupstats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via GroupStatsError)
    - Diagnostic attributes on UnsupportedStatisticError,
      InvalidConfigurationError, DegenerateDistributionError
    - Default attribute values
"""

import pytest

from groupstats.core.exceptions import (
    DegenerateDistributionError,
    DimensionError,
    GroupStatsError,
    InvalidConfigurationError,
    NumericalError,
    UnsupportedStatisticError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via GroupStatsError."""

    def test_validation_error_is_groupstats_error(self):
        with pytest.raises(GroupStatsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_unsupported_statistic_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise UnsupportedStatisticError("no such statistic")

    def test_invalid_configuration_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidConfigurationError("iterations must be >= 1")

    def test_degenerate_distribution_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DegenerateDistributionError("zero variance")

    def test_degenerate_distribution_is_not_validation_error(self):
        err = DegenerateDistributionError("zero variance")
        assert not isinstance(err, ValidationError)
        assert isinstance(err, GroupStatsError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestUnsupportedStatisticError:

    def test_attributes(self):
        err = UnsupportedStatisticError(
            "Unsupported statistic 'mode'", name="mode", valid=("mean", "median"),
        )
        assert str(err) == "Unsupported statistic 'mode'"
        assert err.name == "mode"
        assert err.valid == ("mean", "median")

    def test_defaults(self):
        err = UnsupportedStatisticError("unsupported")
        assert err.name is None
        assert err.valid == ()


class TestInvalidConfigurationError:

    def test_attributes(self):
        err = InvalidConfigurationError(
            "iterations must be >= 1, got 0", parameter="iterations", value=0,
        )
        assert err.parameter == "iterations"
        assert err.value == 0

    def test_defaults_are_none(self):
        err = InvalidConfigurationError("bad")
        assert err.parameter is None
        assert err.value is None


class TestDegenerateDistributionError:

    def test_attributes(self):
        err = DegenerateDistributionError("zero variance", sd=0.0, n_finite=100)
        assert str(err) == "zero variance"
        assert err.sd == 0.0
        assert err.n_finite == 100

    def test_catchable_with_attributes(self):
        with pytest.raises(DegenerateDistributionError) as exc_info:
            raise DegenerateDistributionError("degenerate", sd=0.0, n_finite=3)
        assert exc_info.value.n_finite == 3
