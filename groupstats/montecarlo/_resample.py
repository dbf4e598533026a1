"""
Resampling of a pooled sample into two groups.

A Resampler owns its own numpy Generator, seeded once at construction, so
two Resamplers built from the same seed produce the same sequence of
splits. Nothing touches numpy's global random state.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from groupstats.core.exceptions import ValidationError

DEFAULT_SEED = 999


class Resampler:
    """
    Split a pooled sample into two shuffled groups.

    With replacement, n_total indices are drawn independently and
    uniformly from [0, n_total). Without replacement, a uniform random
    permutation of all n_total indices is drawn. Either way the reordered
    pool is split at position n_a, so group sizes are always preserved.

    Usage:
        resampler = Resampler(seed=999, replace=True)
        a, b = resampler.split(pool, n_a)
    """

    def __init__(self, seed: int | None = DEFAULT_SEED, replace: bool = True):
        self._seed = seed
        self._replace = bool(replace)
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def replace(self) -> bool:
        return self._replace

    def indices(self, n_total: int) -> NDArray[np.intp]:
        """Draw one index ordering of length n_total."""
        if self._replace:
            return self._rng.integers(0, n_total, size=n_total)
        return self._rng.permutation(n_total)

    def split(self, pool: NDArray, n_a: int) -> tuple[NDArray, NDArray]:
        """
        Draw one shuffled partition of pool.

        Args:
            pool: Pooled observations, shape (n_total,)
            n_a: Size of the first group

        Returns:
            (a, b) with len(a) == n_a and len(b) == n_total - n_a

        Raises:
            ValidationError: If n_a does not leave both groups non-empty
        """
        n_total = len(pool)
        if not 1 <= n_a < n_total:
            raise ValidationError(
                f"n_a must be in [1, {n_total - 1}] for a pool of "
                f"{n_total} values, got {n_a}"
            )
        shuffled = pool[self.indices(n_total)]
        return shuffled[:n_a], shuffled[n_a:]
