"""
CPU backend for the permutation z-test.

CPUPermutationBackend: shuffles the pooled groups a fixed number of times
and z-scores the observed statistic against the shuffle distribution.
"""

from __future__ import annotations

import numpy as np

from groupstats.core.result import Result
from groupstats.core.compute.timing import Timer
from groupstats.montecarlo._common import PermutationParams
from groupstats.montecarlo._resample import Resampler
from groupstats.montecarlo._significance import evaluate
from groupstats.montecarlo._statistics import get_statistic, statistic_name
from groupstats.montecarlo.design import PermutationDesign


class CPUPermutationBackend:
    """
    CPU backend for permutation testing.

    The Resampler is rebuilt from design.seed on every solve(), so repeated
    runs with the same design are bit-identical. The loop always runs the
    full number of iterations.
    """

    @property
    def name(self) -> str:
        return 'cpu_permutation'

    def solve(self, design: PermutationDesign) -> Result[PermutationParams]:
        """Run permutation test and return Result[PermutationParams]."""
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        statistic = get_statistic(design.statistic)
        iterations = design.iterations
        warnings_list: list[str] = []

        # Compute observed statistic on the original group assignment
        with timer.section('observed_stat'):
            observed = float(statistic(x, y))

        if not np.isfinite(observed):
            warnings_list.append(
                f"observed statistic is not finite ({observed}); "
                f"z and p-values are undefined"
            )

        # Generate shuffle distribution
        with timer.section('permutation_replicates'):
            pool = np.concatenate([x, y])
            n1 = len(x)
            resampler = Resampler(seed=design.seed, replace=design.replace)
            null = np.empty(iterations, dtype=np.float64)

            for b in range(iterations):
                a_shuffled, b_shuffled = resampler.split(pool, n1)
                null[b] = statistic(a_shuffled, b_shuffled)

        null.flags.writeable = False

        n_nonfinite = int(np.sum(~np.isfinite(null)))
        if n_nonfinite:
            warnings_list.append(
                f"{n_nonfinite} of {iterations} shuffle statistics are not "
                f"finite and were excluded from the shuffle mean and SD"
            )

        with timer.section('significance'):
            sig = evaluate(
                np.array([observed]), null.reshape(-1, 1), design.method,
            )

        if sig.n_single:
            warnings_list.append(
                "only one finite shuffle statistic; z is undefined and "
                "p-values are reported as 1"
            )

        timer.stop()

        params = PermutationParams(
            observed=observed,
            null_distribution=null,
            z=float(sig.z[0]),
            p_value=float(sig.p[0]),
            q_left=float(sig.q_left[0]),
            q_right=float(sig.q_right[0]),
            iterations=iterations,
            statistic=statistic_name(design.statistic),
            replace=design.replace,
            method=design.method,
        )

        return Result(
            params=params,
            info={
                'n1': len(x),
                'n2': len(y),
                'n_total': len(pool),
                'replace': design.replace,
                'seed': design.seed,
                'missing': design.missing,
                'n_nonfinite': n_nonfinite,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
