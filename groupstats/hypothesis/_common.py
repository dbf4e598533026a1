"""
Common types for hypothesis tests.

Defines HTestParams, the parameter payload for a single test result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Attributes
    ----------
    statistic : float
        Test statistic value (NaN when undefined).
    statistic_name : str
        Name of the test statistic ("X-squared").
    parameter : dict or None
        Distribution parameters, e.g. {"df": 1}.
    p_value : float
        p-value of the test.
    conf_int : ndarray or None
        Confidence interval, shape (2,).
    conf_level : float
        Confidence level (e.g. 0.95).
    estimate : dict or None
        Point estimate(s), e.g. {"prop 1": 0.4, "prop 2": 0.25}.
    method : str
        Human-readable method name.
    data_name : str
        Description of the data.
    extras : dict or None
        Test-specific additional outputs (counts, sample sizes).
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float] | None
    p_value: float
    conf_int: NDArray[np.floating[Any]] | None
    conf_level: float
    estimate: dict[str, float] | None
    method: str
    data_name: str
    extras: dict[str, Any] | None = None
