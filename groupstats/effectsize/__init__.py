"""
Two-group effect sizes.

Public API:
    effect_size(x, y)                   - All effect sizes as an EffectSizeSolution
    cohen_d(x, y)                       - Cohen's d
    hedge_g(x, y)                       - Hedge's g
    glass_delta(x, y)                   - Glass's delta (y is the control group)
    cliff_delta(x, y)                   - Cliff's delta
    probability_of_superiority(x, y)    - Probability of superiority
"""

from groupstats.effectsize.solvers import effect_size
from groupstats.effectsize._effect_size import (
    cohen_d,
    hedge_g,
    glass_delta,
    cliff_delta,
    probability_of_superiority,
    pooled_sd,
)
from groupstats.effectsize.design import EffectSizeDesign
from groupstats.effectsize._common import EffectSizeParams
from groupstats.effectsize.solution import EffectSizeSolution

__all__ = [
    "effect_size",
    "cohen_d",
    "hedge_g",
    "glass_delta",
    "cliff_delta",
    "probability_of_superiority",
    "pooled_sd",
    "EffectSizeDesign",
    "EffectSizeParams",
    "EffectSizeSolution",
]
