"""
Common data structures for effect sizes.

EffectSizeParams is the parameter payload wrapped by Result[P] and
exposed through EffectSizeSolution.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EffectSizeParams:
    """
    Parameter payload for two-group effect sizes.

    Group 1 is x, group 2 (the control group for Glass's delta) is y.
    Counts, means and SDs are over non-missing values only.
    """
    mean_1: float
    mean_2: float
    sd_1: float                     # sample SD, ddof=1
    sd_2: float
    num_1: int
    num_2: int
    mean_diff: float                # mean_1 - mean_2
    df: int                         # num_1 + num_2 - 2
    sd_pooled: float                # Bessel-corrected pooled SD
    cohen_d: float
    hedge_g: float
    glass_delta: float
    cliff_delta: float              # in [-1, 1]
    probability_of_superiority: float   # in [0, 1]
