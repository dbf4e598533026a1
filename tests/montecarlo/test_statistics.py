"""
Tests for the group-difference statistics used by the permutation test.

Checks each registered statistic against hand-computed values or scipy,
missing-value exclusion, degenerate inputs and registry lookup.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from groupstats.core.exceptions import UnsupportedStatisticError
from groupstats.montecarlo import STATISTICS, VALID_STATISTICS, get_statistic
from groupstats.montecarlo._statistics import (
    f_statistic,
    mean_difference,
    median_difference,
    statistic_name,
    t_statistic,
)


A = np.array([1.0, 2.0, 3.0])
B = np.array([4.0, 5.0, 6.0])


# ---------------------------------------------------------------------------
# Location statistics
# ---------------------------------------------------------------------------

class TestLocation:

    def test_mean_difference(self):
        assert mean_difference(A, B) == pytest.approx(-3.0)

    def test_mean_difference_ignores_nan(self):
        a = np.array([1.0, np.nan, 3.0])
        b = np.array([2.0, np.nan])
        assert mean_difference(a, b) == pytest.approx(0.0)

    def test_median_difference(self):
        a = np.array([1.0, 2.0, 100.0])
        b = np.array([0.0, 1.0, 1.0, 50.0])
        assert median_difference(a, b) == pytest.approx(1.0)

    def test_all_missing_group_gives_nan(self):
        assert np.isnan(mean_difference(np.array([np.nan]), B))
        assert np.isnan(median_difference(A, np.array([np.nan, np.nan])))


# ---------------------------------------------------------------------------
# t and F
# ---------------------------------------------------------------------------

class TestTAndF:

    def test_t_matches_pooled_scipy(self, rng):
        a = rng.normal(0, 1, 25)
        b = rng.normal(0.5, 2, 30)
        expected = sp_stats.ttest_ind(a, b, equal_var=True).statistic
        assert t_statistic(a, b) == pytest.approx(expected, rel=1e-12)

    def test_t_is_pooled_not_welch(self, rng):
        a = rng.normal(0, 1, 10)
        b = rng.normal(0, 5, 40)
        welch = sp_stats.ttest_ind(a, b, equal_var=False).statistic
        assert t_statistic(a, b) != pytest.approx(welch, rel=1e-6)

    def test_f_equals_t_squared(self, rng):
        a = rng.normal(0, 1, 20)
        b = rng.normal(1, 1, 15)
        assert f_statistic(a, b) == pytest.approx(t_statistic(a, b) ** 2, rel=1e-10)

    def test_ignores_nan(self):
        a = np.array([1.0, 2.0, np.nan, 4.0])
        expected = sp_stats.ttest_ind([1.0, 2.0, 4.0], B, equal_var=True).statistic
        assert t_statistic(a, B) == pytest.approx(expected)

    def test_no_spread_gives_nan(self):
        const = np.array([2.0, 2.0, 2.0])
        assert np.isnan(t_statistic(const, const))
        assert np.isnan(f_statistic(const, np.array([5.0, 5.0])))

    def test_too_few_values_gives_nan(self):
        assert np.isnan(t_statistic(np.array([1.0]), np.array([2.0])))


# ---------------------------------------------------------------------------
# Effect-size statistics
# ---------------------------------------------------------------------------

class TestEffectSizeStatistics:

    def test_cohen(self):
        # means 2 and 5, both SDs 1, pooled SD 1
        assert STATISTICS["cohen"](A, B) == pytest.approx(-3.0)

    def test_hedge(self):
        # correction 1 - 3 / (4 * 6 - 9) = 0.8
        assert STATISTICS["hedge"](A, B) == pytest.approx(-2.4)

    def test_cliff_hand_computed(self):
        a = np.array([1.0, 2.0, 3.0])
        b = np.array([2.0, 3.0, 4.0])
        # 1 greater, 6 less, 2 ties over 9 pairs
        assert STATISTICS["cliff"](a, b) == pytest.approx(-5.0 / 9.0)
        assert STATISTICS["p_super"](a, b) == pytest.approx(2.0 / 9.0)

    def test_cliff_matches_pairwise(self, rng):
        a = rng.integers(0, 5, 40).astype(float)
        b = rng.integers(0, 5, 35).astype(float)
        expected = np.sign(np.subtract.outer(a, b)).mean()
        assert STATISTICS["cliff"](a, b) == pytest.approx(expected)

    @pytest.mark.parametrize("seed", range(5))
    def test_dominance_bounds(self, seed):
        r = np.random.default_rng(seed)
        a = r.normal(r.normal(), 1, 15)
        b = r.normal(r.normal(), 1, 20)
        assert -1.0 <= STATISTICS["cliff"](a, b) <= 1.0
        assert 0.0 <= STATISTICS["p_super"](a, b) <= 1.0


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestRegistry:

    def test_valid_names(self):
        assert VALID_STATISTICS == (
            "mean", "median", "t", "f", "cohen", "hedge", "cliff", "p_super",
        )

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            STATISTICS["mode"] = mean_difference

    def test_lookup(self):
        assert get_statistic("mean") is mean_difference

    def test_callable_passes_through(self):
        def my_stat(a, b):
            return float(np.max(a) - np.max(b))
        assert get_statistic(my_stat) is my_stat
        assert statistic_name(my_stat) == "my_stat"

    def test_unknown_name(self):
        with pytest.raises(UnsupportedStatisticError, match="'mode'") as exc:
            get_statistic("mode")
        assert exc.value.name == "mode"
        assert "mean" in exc.value.valid

    def test_unhashable_name(self):
        with pytest.raises(UnsupportedStatisticError):
            get_statistic(["mean"])

    @pytest.mark.parametrize("name", VALID_STATISTICS)
    def test_all_statistics_return_float(self, name, rng):
        value = get_statistic(name)(rng.normal(0, 1, 12), rng.normal(1, 1, 9))
        assert isinstance(value, float)
        assert np.isfinite(value)
