"""
Solution wrapper for effect size results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from groupstats.core.result import Result
from groupstats.effectsize._common import EffectSizeParams

if TYPE_CHECKING:
    from groupstats.effectsize.design import EffectSizeDesign


@dataclass
class EffectSizeSolution:
    """
    User-facing effect size results.

    Every field of EffectSizeParams is available as a property; as_dict()
    returns them all at once.
    """
    _result: Result[EffectSizeParams]
    _design: 'EffectSizeDesign'

    # --- Group descriptives ---

    @property
    def mean_1(self) -> float:
        return self._result.params.mean_1

    @property
    def mean_2(self) -> float:
        return self._result.params.mean_2

    @property
    def sd_1(self) -> float:
        return self._result.params.sd_1

    @property
    def sd_2(self) -> float:
        return self._result.params.sd_2

    @property
    def num_1(self) -> int:
        return self._result.params.num_1

    @property
    def num_2(self) -> int:
        return self._result.params.num_2

    @property
    def mean_diff(self) -> float:
        return self._result.params.mean_diff

    @property
    def df(self) -> int:
        return self._result.params.df

    @property
    def sd_pooled(self) -> float:
        return self._result.params.sd_pooled

    # --- Effect sizes ---

    @property
    def cohen_d(self) -> float:
        """Cohen's d (Bessel-corrected pooled SD)."""
        return self._result.params.cohen_d

    @property
    def hedge_g(self) -> float:
        """Hedge's g, bias-corrected Cohen's d."""
        return self._result.params.hedge_g

    @property
    def glass_delta(self) -> float:
        """Glass's delta, scaled by the SD of y."""
        return self._result.params.glass_delta

    @property
    def cliff_delta(self) -> float:
        """Cliff's delta, in [-1, 1]."""
        return self._result.params.cliff_delta

    @property
    def probability_of_superiority(self) -> float:
        """P(x > y) + 0.5 P(x == y), in [0, 1]."""
        return self._result.params.probability_of_superiority

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def as_dict(self) -> dict[str, float]:
        """All descriptives and effect sizes keyed by field name."""
        p = self._result.params
        return {name: getattr(p, name) for name in p.__dataclass_fields__}

    # --- Display ---

    def summary(self) -> str:
        """Effect size table."""
        p = self._result.params
        lines = [
            "\nEFFECT SIZES",
            "",
            f"{'':>28s} {'x':>12s} {'y':>12s}",
            f"{'n':>28s} {p.num_1:12d} {p.num_2:12d}",
            f"{'mean':>28s} {p.mean_1:12.5g} {p.mean_2:12.5g}",
            f"{'sd':>28s} {p.sd_1:12.5g} {p.sd_2:12.5g}",
            "",
            f"{'mean difference':>28s} {p.mean_diff:12.5g}",
            f"{'pooled sd':>28s} {p.sd_pooled:12.5g}",
            f"{'Cohen d':>28s} {p.cohen_d:12.5g}",
            f"{'Hedge g':>28s} {p.hedge_g:12.5g}",
            f"{'Glass delta':>28s} {p.glass_delta:12.5g}",
            f"{'Cliff delta':>28s} {p.cliff_delta:12.5g}",
            f"{'probability of superiority':>28s} "
            f"{p.probability_of_superiority:12.5g}",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"EffectSizeSolution(n1={p.num_1}, n2={p.num_2}, "
            f"cohen_d={p.cohen_d:.4g}, cliff_delta={p.cliff_delta:.4g})"
        )
