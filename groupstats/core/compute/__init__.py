"""
Shared compute infrastructure for groupstats.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared infrastructure only.

Submodules:
    timing: Execution timing utilities
"""

from groupstats.core.compute.timing import Timer

__all__ = [
    "Timer",
]
