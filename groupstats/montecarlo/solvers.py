"""
Solver dispatch for Monte Carlo methods.

Provides permutation_test() and re-exports z_probability().
"""

from __future__ import annotations

from typing import Callable
from numpy.typing import ArrayLike

from groupstats.core.exceptions import ValidationError
from groupstats.montecarlo.design import PermutationDesign
from groupstats.montecarlo.solution import PermutationSolution
from groupstats.montecarlo.backends.cpu import CPUPermutationBackend
from groupstats.montecarlo._resample import DEFAULT_SEED
from groupstats.montecarlo._significance import z_probability  # re-export


def _get_backend(backend: str = 'cpu'):
    """Select backend for permutation testing. Only 'cpu' is available."""
    if backend in ('cpu', 'auto'):
        return CPUPermutationBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def permutation_test(
    x: ArrayLike | PermutationDesign,
    y: ArrayLike | None = None,
    statistic: str | Callable = "mean",
    iterations: int = 1000,
    *,
    replace: bool = True,
    seed: int | None = DEFAULT_SEED,
    missing: str = "retain",
    method: str = "normal",
    backend: str = 'cpu',
) -> PermutationSolution:
    """
    Permutation z-test for the difference between two groups.

    The group-difference statistic is computed on the original groups,
    then on `iterations` shuffles of the pooled data. The observed value
    is z-scored against the shuffles and converted to p-values.

    Parameters
    ----------
    x : array-like or PermutationDesign
        Group 1 data, 1D. NaN marks missing values.
    y : array-like
        Group 2 data, 1D.
    statistic : str or callable
        'mean' (mean difference, default), 'median' (median difference),
        't' (pooled-variance t statistic), 'f' (one-way ANOVA F),
        'cohen' (Cohen's d), 'hedge' (Hedge's g), 'cliff' (Cliff's delta),
        'p_super' (probability of superiority), or fn(x, y) -> float.
    iterations : int
        Number of shuffles. Default 1000.
    replace : bool
        Shuffle with replacement (default) or as a pure permutation.
    seed : int or None
        Seed applied at the start of every call. Default 999, so the
        same inputs always give the same result.
    missing : str
        'retain' (default): NaN stay in the pooled sample and each
        statistic ignores them. 'omit': NaN are removed from both groups
        first, which shrinks the pooled sample.
    method : str
        'normal' (default): p-values from the normal approximation to the
        shuffle distribution. 'empirical': one-tailed p-values are the
        add-one corrected shuffle tail proportions.
    backend : str
        'cpu' (default).

    Returns
    -------
    PermutationSolution
        observed, z, p_value (two-tailed), q_left, q_right and the full
        null_distribution.

    Notes
    -----
    Group differences follow the order of the inputs: a negative mean
    difference means y has the larger mean.

    Examples
    --------
    >>> import numpy as np
    >>> rng = np.random.default_rng(0)
    >>> x = rng.normal(0, 10, 1000)
    >>> y = rng.normal(5, 10, 1000)
    >>> res = permutation_test(x, y, "cohen", iterations=1000)
    >>> res.observed < 0 and res.p_value < 0.05
    True
    """
    if isinstance(x, PermutationDesign):
        design = x
    else:
        design = PermutationDesign.for_permutation_test(
            x, y, statistic, iterations,
            replace=replace,
            seed=seed,
            missing=missing,
            method=method,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return PermutationSolution(_result=result, _design=design)


__all__ = ["permutation_test", "z_probability"]
