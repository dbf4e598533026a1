"""
groupstats Monte Carlo methods.

Provides the two-group permutation z-test and the z-score / p-value
evaluation it is built on.

Usage:
    from groupstats.montecarlo import permutation_test, z_probability

    # Permutation test
    result = permutation_test(x, y, "cohen", iterations=1000)
    result.z, result.p_value, result.q

    # Observed value against any shuffle distribution
    zp = z_probability(observed, shuffles)
"""

from groupstats.montecarlo.solvers import permutation_test, z_probability
from groupstats.montecarlo.design import PermutationDesign
from groupstats.montecarlo.solution import PermutationSolution
from groupstats.montecarlo._common import PermutationParams
from groupstats.montecarlo._resample import Resampler, DEFAULT_SEED
from groupstats.montecarlo._significance import ZProbability
from groupstats.montecarlo._statistics import (
    STATISTICS,
    VALID_STATISTICS,
    get_statistic,
)

__all__ = [
    "permutation_test",
    "z_probability",
    "PermutationDesign",
    "PermutationSolution",
    "PermutationParams",
    "Resampler",
    "DEFAULT_SEED",
    "ZProbability",
    "STATISTICS",
    "VALID_STATISTICS",
    "get_statistic",
]
