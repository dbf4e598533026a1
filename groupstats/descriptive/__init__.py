"""
Descriptive statistics with missing-value exclusion.

Public API:
    sem(x, axis=0)      - Standard error of the mean, ignoring NaN
    drop_missing(x)     - Remove NaN from a 1D array
"""

from groupstats.descriptive._missing import drop_missing
from groupstats.descriptive.solvers import sem

__all__ = [
    "sem",
    "drop_missing",
]
