"""
Common data structures for Monte Carlo methods.

PermutationParams is the parameter payload wrapped by Result[P] and
exposed through PermutationSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class PermutationParams:
    """
    Parameter payload for permutation z-test results.

    - observed: group-difference statistic on the original groups
    - null_distribution: the statistic on each of the `iterations` shuffles
    - z: observed value z-scored against the shuffles
    - p_value: two-tailed p-value
    - q_left, q_right: one-tailed p-values
    """
    observed: float
    null_distribution: NDArray[np.floating[Any]]   # shape (iterations,)
    z: float
    p_value: float
    q_left: float
    q_right: float
    iterations: int
    statistic: str
    replace: bool
    method: str                                     # "normal" | "empirical"
