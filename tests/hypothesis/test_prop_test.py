"""
Tests for the N-1 chi-squared comparison of two proportions.

Reference values are computed by hand from
chi2 = (N - 1)(p1 - p2)^2 / (x (1 - x/N)(1/n1 + 1/n2)).
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from groupstats.core.exceptions import ValidationError
from groupstats.hypothesis import HTestSolution, PropTestDesign, prop_test_n1


class TestReference:

    def test_forty_vs_twenty_five_percent(self):
        res = prop_test_n1(100, 40, 100, 25)
        assert isinstance(res, HTestSolution)
        assert res.statistic == pytest.approx(5.102564, rel=1e-6)
        assert res.p_value == pytest.approx(0.02389, abs=1e-5)
        assert res.parameter == {"df": 1.0}
        np.testing.assert_allclose(res.conf_int, [0.02185, 0.27815], atol=1e-5)
        assert res.conf_level == pytest.approx(0.95)

    def test_estimates(self):
        res = prop_test_n1(100, 40, 100, 25)
        assert res.estimate["prop 1"] == pytest.approx(0.40)
        assert res.estimate["prop 2"] == pytest.approx(0.25)
        assert res.estimate["difference"] == pytest.approx(0.15)
        assert res.data_name == "40 out of 100 and 25 out of 100"

    def test_against_formula(self):
        n1, x1, n2, x2 = 37, 12, 52, 30
        p1, p2 = x1 / n1, x2 / n2
        n, x = n1 + n2, x1 + x2
        chisq = (n - 1) * (p1 - p2) ** 2 / (x * (1 - x / n) * (1 / n1 + 1 / n2))
        res = prop_test_n1(n1, 100 * x1 / n1, n2, 100 * x2 / n2)
        assert res.statistic == pytest.approx(chisq)
        assert res.p_value == pytest.approx(sp_stats.chi2.sf(chisq, 1))
        assert res.extras["x1"] == x1
        assert res.extras["x2"] == x2

    def test_smaller_than_pearson(self):
        # N-1 scaling makes the statistic (N-1)/N times Pearson's
        table = np.array([[40, 60], [25, 75]])
        pearson = sp_stats.chi2_contingency(table, correction=False)[0]
        res = prop_test_n1(100, 40, 100, 25)
        assert res.statistic == pytest.approx(pearson * 199 / 200)

    def test_equal_proportions(self):
        res = prop_test_n1(50, 30, 80, 30)
        assert res.statistic == pytest.approx(0.0)
        assert res.p_value == pytest.approx(1.0)
        assert res.conf_int[0] < 0 < res.conf_int[1]

    def test_alpha_widens_interval(self):
        narrow = prop_test_n1(100, 40, 100, 25, alpha=0.10)
        wide = prop_test_n1(100, 40, 100, 25, alpha=0.01)
        assert np.diff(wide.conf_int)[0] > np.diff(narrow.conf_int)[0]
        assert narrow.conf_level == pytest.approx(0.90)
        assert narrow.p_value == wide.p_value


class TestCounts:

    def test_percentage_rounds_half_up(self):
        # 12.5% of 4 is 0.5 successes, counted as 1
        res = prop_test_n1(4, 12.5, 4, 50)
        assert res.extras["x1"] == 1
        assert res.estimate["prop 1"] == pytest.approx(0.25)

    def test_percentage_rounds_to_nearest(self):
        res = prop_test_n1(3, 30, 7, 60)
        # 0.9 -> 1 and 4.2 -> 4
        assert res.data_name == "1 out of 3 and 4 out of 7"


class TestDegenerate:

    @pytest.mark.parametrize("pct", [0, 100])
    def test_all_same_outcome(self, pct):
        res = prop_test_n1(20, pct, 30, pct)
        assert np.isnan(res.statistic)
        assert np.isnan(res.p_value)
        assert len(res.warnings) == 1
        assert "undefined" in res.warnings[0]
        assert "NaN" in res.text_result


class TestValidation:

    @pytest.mark.parametrize("n1", [0, -3, 2.5, float("nan"), "10", True])
    def test_bad_size(self, n1):
        with pytest.raises(ValidationError, match="n1"):
            prop_test_n1(n1, 40, 100, 25)

    @pytest.mark.parametrize("pct2", [-1, 100.5])
    def test_bad_percentage(self, pct2):
        with pytest.raises(ValidationError, match="pct2"):
            prop_test_n1(100, 40, 100, pct2)

    @pytest.mark.parametrize("alpha", [0, 1, 1.5])
    def test_bad_alpha(self, alpha):
        with pytest.raises(ValidationError, match="alpha"):
            prop_test_n1(100, 40, 100, 25, alpha=alpha)

    def test_whole_float_size_accepted(self):
        assert prop_test_n1(100.0, 40, 100, 25).extras["n1"] == 100


class TestSolution:

    def test_text_result(self):
        assert prop_test_n1(100, 40, 100, 25).text_result == "X^2 = 5.1, p = .024"

    def test_summary(self):
        text = prop_test_n1(100, 40, 100, 25).summary()
        assert "N-1 chi-squared test" in text
        assert "data:  40 out of 100 and 25 out of 100" in text
        assert "X-squared = 5.1026" in text
        assert "95 percent confidence interval:" in text
        assert "sample estimates:" in text

    def test_design_passed_directly(self):
        design = PropTestDesign.for_prop_test_n1(100, 40, 100, 25)
        assert prop_test_n1(design).statistic == prop_test_n1(100, 40, 100, 25).statistic

    def test_metadata(self):
        res = prop_test_n1(100, 40, 100, 25)
        assert res.backend_name == "cpu_hypothesis"
        assert res.info["test_type"] == "prop_test_n1"
        assert "prop_test_n1" in res.timing
        assert repr(res).startswith("HTestSolution(method=")
