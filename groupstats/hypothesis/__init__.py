"""
Hypothesis tests for two-group comparisons.

Public API:
    prop_test_n1(n1, pct1, n2, pct2)  - N-1 chi-squared test of two proportions
"""

from groupstats.hypothesis.solvers import prop_test_n1
from groupstats.hypothesis.design import PropTestDesign
from groupstats.hypothesis._common import HTestParams
from groupstats.hypothesis.solution import HTestSolution

__all__ = [
    "prop_test_n1",
    "PropTestDesign",
    "HTestParams",
    "HTestSolution",
]
