"""
Design class for effect sizes.

EffectSizeDesign holds the two validated groups. Immutable, validated at
construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from groupstats.core.validation import check_group


@dataclass(frozen=True)
class EffectSizeDesign:
    """
    Frozen design for two-group effect sizes.

    Attributes:
        x: Group 1 data, shape (n1,). May contain NaN.
        y: Group 2 (control) data, shape (n2,). May contain NaN.
    """
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]

    @classmethod
    def for_effect_size(cls, x: ArrayLike, y: ArrayLike) -> EffectSizeDesign:
        """
        Create an effect size design with validation.

        Raises:
            ValidationError: If a group is empty, all-missing or non-numeric.
            DimensionError: If a group is not a vector.
        """
        return cls(x=check_group(x, "x"), y=check_group(y, "y"))
