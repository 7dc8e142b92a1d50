# SPDX-License-Identifier: MIT
"""Tolerance-aware comparison of split results against expectations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .numerics import NAN, SplitFunction, SplitResult

__all__ = [
    "Verdict",
    "compare",
    "compare_nan",
    "deviation",
    "format_diagnostic",
]

_DIAGNOSTIC = (
    "modf(%g) returned %20.17g with an intpart of %20.17g "
    "when it should have returned %20.17g with an intpart of %20.17g"
)


@dataclass(frozen=True)
class Verdict:
    """Outcome of a single comparison."""

    passed: bool
    value: float
    actual: SplitResult
    expected: SplitResult
    kind: str = "tolerance"
    message: str = ""

    @property
    def values(self) -> tuple[float, float, float, float, float]:
        """Input, actual halves and expected halves, in diagnostic order."""

        return (
            self.value,
            self.actual.fraction,
            self.actual.integral,
            self.expected.fraction,
            self.expected.integral,
        )


def format_diagnostic(value: float, actual: SplitResult, expected: SplitResult) -> str:
    return _DIAGNOSTIC % (
        value,
        actual.fraction,
        actual.integral,
        expected.fraction,
        expected.integral,
    )


def deviation(actual: float, expected: float) -> float:
    """Absolute difference, zero for identical values including infinities.

    A NaN on either side yields NaN.
    """

    if actual == expected:
        return 0.0
    return abs(actual - expected)


def _within(delta: float, tolerance: float) -> bool:
    # NaN deviations compare false and therefore fail.
    return delta <= tolerance


def compare(
    split: SplitFunction,
    value: float,
    expected_fraction: float,
    fraction_tolerance: float,
    expected_integral: float,
    integral_tolerance: float,
) -> Verdict:
    """Run ``split(value)`` and check both halves against their tolerances."""

    actual = SplitResult(*split(value))
    expected = SplitResult(expected_fraction, expected_integral)

    delta_fraction = deviation(actual.fraction, expected_fraction)
    delta_integral = deviation(actual.integral, expected_integral)
    passed = _within(delta_fraction, fraction_tolerance) and _within(
        delta_integral, integral_tolerance
    )
    message = "" if passed else format_diagnostic(value, actual, expected)
    return Verdict(passed, value, actual, expected, "tolerance", message)


def compare_nan(split: SplitFunction, value: float = NAN) -> Verdict:
    """Check that splitting a NaN yields NaN in both halves.

    NaN fails every ordered comparison, itself included, so no tolerance
    applies here.
    """

    actual = SplitResult(*split(value))
    expected = SplitResult(NAN, NAN)
    passed = math.isnan(actual.fraction) and math.isnan(actual.integral)
    message = "" if passed else format_diagnostic(value, actual, expected)
    return Verdict(passed, value, actual, expected, "nan", message)
