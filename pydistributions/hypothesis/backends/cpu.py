"""
CPU reference backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from pydistributions.core.result import Result
from pydistributions.core.compute.timing import Timer
from pydistributions.hypothesis._common import HTestParams
from pydistributions.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type in ("ks_one_sample", "ks_two_sample"):
                from pydistributions.hypothesis.backends._ks_test import ks_test
                params, warnings_list = ks_test(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        info = {'test_type': test_type}
        if params.extras:
            info['algorithm'] = params.extras.get('algorithm')

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
