"""
Solver for two-proportion comparison.
"""

from __future__ import annotations

from groupstats.core.result import Result
from groupstats.core.compute.timing import Timer
from groupstats.hypothesis._prop_test import prop_test_n1 as _prop_test_n1
from groupstats.hypothesis.design import PropTestDesign
from groupstats.hypothesis.solution import HTestSolution


def prop_test_n1(
    n1: int | PropTestDesign,
    pct1: float | None = None,
    n2: int | None = None,
    pct2: float | None = None,
    *,
    alpha: float = 0.05,
) -> HTestSolution:
    """
    Compare two independent proportions with the N-1 chi-squared test.

    Parameters
    ----------
    n1, n2 : int or PropTestDesign
        Sample sizes of groups 1 and 2. A pre-built PropTestDesign may be
        passed as the first argument instead.
    pct1, pct2 : float
        Observed percentages (0-100) in groups 1 and 2. Converted to
        counts by rounding pct / 100 * n.
    alpha : float
        Significance level for the (1 - alpha) confidence interval of the
        difference in proportions. Default 0.05.

    Returns
    -------
    HTestSolution
        statistic (N-1 chi-squared), p_value (df = 1), conf_int for
        prop 1 - prop 2, estimate, text_result.

    Examples
    --------
    >>> res = prop_test_n1(100, 40, 100, 25)
    >>> res.p_value < 0.05
    True
    """
    if isinstance(n1, PropTestDesign):
        design = n1
    else:
        design = PropTestDesign.for_prop_test_n1(n1, pct1, n2, pct2, alpha=alpha)

    timer = Timer()
    timer.start()
    with timer.section('prop_test_n1'):
        params, warnings_list = _prop_test_n1(design)
    timer.stop()

    result = Result(
        params=params,
        info={'test_type': 'prop_test_n1'},
        timing=timer.result(),
        backend_name='cpu_hypothesis',
        warnings=tuple(warnings_list),
    )
    return HTestSolution(_result=result, _design=design)
