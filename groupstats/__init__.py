"""
groupstats: statistics for comparing two groups.

Submodules:
    montecarlo: Permutation z-test and z-score / p-value evaluation
    effectsize: Cohen's d, Hedge's g, Glass's delta, Cliff's delta,
        probability of superiority
    hypothesis: N-1 chi-squared test of two proportions
    descriptive: Missing-value aware helpers (standard error of the mean)
"""

__version__ = "0.1.0"

from groupstats import montecarlo
from groupstats import effectsize
from groupstats import hypothesis
from groupstats import descriptive
from groupstats.montecarlo import permutation_test, z_probability
from groupstats.effectsize import effect_size
from groupstats.hypothesis import prop_test_n1

__all__ = [
    "__version__",
    "montecarlo",
    "effectsize",
    "hypothesis",
    "descriptive",
    "permutation_test",
    "z_probability",
    "effect_size",
    "prop_test_n1",
]
