"""
Solver for two-group effect sizes.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from groupstats.core.result import Result
from groupstats.core.compute.timing import Timer
from groupstats.effectsize._effect_size import compute_effect_sizes
from groupstats.effectsize.design import EffectSizeDesign
from groupstats.effectsize.solution import EffectSizeSolution


def effect_size(
    x: ArrayLike | EffectSizeDesign,
    y: ArrayLike | None = None,
) -> EffectSizeSolution:
    """
    Effect sizes for the difference between group x and group y.

    Parameters
    ----------
    x : array-like or EffectSizeDesign
        Group 1 data, 1D. NaN marks missing values.
    y : array-like
        Group 2 data, 1D. Used as the control group for Glass's delta.

    Returns
    -------
    EffectSizeSolution
        Means, SDs, counts, pooled SD, Cohen's d, Hedge's g, Glass's delta,
        Cliff's delta and probability of superiority.

    Examples
    --------
    >>> import numpy as np
    >>> rng = np.random.default_rng(0)
    >>> res = effect_size(rng.normal(1, 1, 100), rng.normal(10, 1, 100))
    >>> res.cohen_d < 0
    True
    """
    if isinstance(x, EffectSizeDesign):
        design = x
    else:
        design = EffectSizeDesign.for_effect_size(x, y)

    timer = Timer()
    timer.start()
    with timer.section('effect_sizes'):
        params, warnings_list = compute_effect_sizes(design.x, design.y)
    timer.stop()

    result = Result(
        params=params,
        info={'n1': len(design.x), 'n2': len(design.y)},
        timing=timer.result(),
        backend_name='cpu_effect_size',
        warnings=tuple(warnings_list),
    )
    return EffectSizeSolution(_result=result, _design=design)
