# SPDX-License-Identifier: MIT
"""Drive the reference table through the comparator and aggregate verdicts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .cases import REFERENCE_CASES, SplitCase
from .comparator import Verdict, compare, compare_nan
from .numerics import NAN, SplitFunction
from .reporting import FAIL, PASS, HarnessEnvironment

__all__ = [
    "RunReport",
    "execute",
    "run_conformance",
]


@dataclass
class RunReport:
    """Every verdict of one run, in execution order."""

    verdicts: List[Verdict] = field(default_factory=list)

    @property
    def comparisons(self) -> int:
        return len(self.verdicts)

    @property
    def failures(self) -> List[Verdict]:
        return [verdict for verdict in self.verdicts if not verdict.passed]

    @property
    def passed(self) -> bool:
        return all(verdict.passed for verdict in self.verdicts)

    @property
    def exit_status(self) -> int:
        return PASS if self.passed else FAIL

    def summary(self) -> dict[str, float]:
        failed = len(self.failures)
        return {
            "comparisons": float(self.comparisons),
            "failures": float(failed),
            "nan_failures": float(sum(1 for v in self.failures if v.kind == "nan")),
            "passed": float(self.comparisons - failed),
        }


def run_conformance(
    split: SplitFunction,
    cases: Iterable[SplitCase] = REFERENCE_CASES,
    nan_input: float = NAN,
) -> RunReport:
    """Compare ``split`` against every case, its negation and one NaN input.

    Nothing short-circuits: a failing case never prevents later cases from
    running, so a single report lists every defect.
    """

    report = RunReport()
    for case in cases:
        report.verdicts.append(
            compare(
                split,
                case.value,
                case.expected_fraction,
                case.fraction_tolerance,
                case.expected_integral,
                case.integral_tolerance,
            )
        )
        report.verdicts.append(
            compare(
                split,
                -case.value,
                -case.expected_fraction,
                case.fraction_tolerance,
                -case.expected_integral,
                case.integral_tolerance,
            )
        )
    report.verdicts.append(compare_nan(split, nan_input))
    return report


def execute(
    split: SplitFunction,
    environment: HarnessEnvironment,
    argv: Sequence[str] = (),
    cases: Iterable[SplitCase] = REFERENCE_CASES,
) -> tuple[int, RunReport]:
    """Run the full harness lifecycle and return ``(status, report)``.

    If the environment fails to initialize no comparison runs and the status
    is :data:`FAIL`.
    """

    if not environment.initialize(argv):
        return FAIL, RunReport()

    try:
        report = run_conformance(split, cases)
        for verdict in report.failures:
            environment.report_failure(verdict.message, *verdict.values)
    finally:
        environment.terminate()
    return report.exit_status, report
