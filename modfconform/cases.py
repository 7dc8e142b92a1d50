# SPDX-License-Identifier: MIT
"""Reference table for split conformance runs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .numerics import BASE_EPSILON, POSINF, scaled_tolerance

__all__ = [
    "REFERENCE_CASES",
    "SplitCase",
    "build_case",
    "reference_cases",
]


@dataclass(frozen=True)
class SplitCase:
    """Input value with its expected halves and per-half tolerances."""

    value: float
    expected_fraction: float
    fraction_tolerance: float
    expected_integral: float
    integral_tolerance: float
    label: str = ""

    def __post_init__(self) -> None:
        for name in ("fraction_tolerance", "integral_tolerance"):
            tolerance = getattr(self, name)
            if math.isnan(tolerance) or tolerance < 0.0:
                raise ValueError(f"{name} must be non-negative, got {tolerance!r}")

    def negated(self) -> "SplitCase":
        """Mirror the case into the negative domain.

        Absolute deviation is sign-symmetric so the tolerances carry over.
        """

        return SplitCase(
            value=-self.value,
            expected_fraction=-self.expected_fraction,
            fraction_tolerance=self.fraction_tolerance,
            expected_integral=-self.expected_integral,
            integral_tolerance=self.integral_tolerance,
            label=f"-({self.label})" if self.label else "",
        )


def build_case(
    value: float,
    expected_fraction: float,
    expected_integral: float,
    label: str = "",
    *,
    base_epsilon: float = BASE_EPSILON,
) -> SplitCase:
    """Create a case whose tolerances follow :func:`scaled_tolerance`."""

    return SplitCase(
        value=value,
        expected_fraction=expected_fraction,
        fraction_tolerance=scaled_tolerance(expected_fraction, base_epsilon),
        expected_integral=expected_integral,
        integral_tolerance=scaled_tolerance(expected_integral, base_epsilon),
        label=label,
    )


def reference_cases(base_epsilon: float = BASE_EPSILON) -> Tuple[SplitCase, ...]:
    """Return the reference table in execution order."""

    rows = [
        # value                 fraction               integral  label
        (0.0,                   0.0,                   0.0,      "zero"),
        (0.31830988618379067,   0.31830988618379067,   0.0,      "1 / pi"),
        (0.43429448190325183,   0.43429448190325183,   0.0,      "log10(e)"),
        (0.63661977236758134,   0.63661977236758134,   0.0,      "2 / pi"),
        (0.69314718055994531,   0.69314718055994531,   0.0,      "ln(2)"),
        (0.70710678118654752,   0.70710678118654752,   0.0,      "1 / sqrt(2)"),
        (0.78539816339744831,   0.78539816339744831,   0.0,      "pi / 4"),
        (1.0,                   0.0,                   1.0,      "one"),
        (1.1283791670955126,    0.1283791670955126,    1.0,      "2 / sqrt(pi)"),
        (1.4142135623730950,    0.4142135623730950,    1.0,      "sqrt(2)"),
        (1.4426950408889634,    0.4426950408889634,    1.0,      "log2(e)"),
        (1.5707963267948966,    0.5707963267948966,    1.0,      "pi / 2"),
        (2.3025850929940457,    0.3025850929940457,    2.0,      "ln(10)"),
        (2.7182818284590452,    0.7182818284590452,    2.0,      "e"),
        (3.1415926535897932,    0.1415926535897932,    3.0,      "pi"),
        (POSINF,                0.0,                   POSINF,   "+infinity"),
    ]
    return tuple(
        build_case(value, fraction, integral, label, base_epsilon=base_epsilon)
        for value, fraction, integral, label in rows
    )


REFERENCE_CASES = reference_cases()
