"""Faulty split implementations used to exercise failure reporting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List

from modfconform.numerics import SplitResult


def fraction_only_split(value: float) -> SplitResult:
    """Never extracts an integral part."""

    return SplitResult(value, 0.0)


def floor_split(value: float) -> SplitResult:
    """Rounds toward negative infinity instead of toward zero."""

    if math.isnan(value) or math.isinf(value):
        fraction, integral = math.modf(value)
        return SplitResult(fraction, integral)
    integral = float(math.floor(value))
    return SplitResult(value - integral, integral)


def nan_swallowing_split(value: float) -> SplitResult:
    """Maps NaN to zero and is otherwise correct."""

    if math.isnan(value):
        return SplitResult(0.0, 0.0)
    fraction, integral = math.modf(value)
    return SplitResult(fraction, integral)


@dataclass(frozen=True)
class FaultyBackendCase:
    """A broken split together with the failures a full run must surface."""

    name: str
    split: Callable[[float], SplitResult]
    expected_failures: int
    expected_nan_failures: int


def faulty_backend_cases() -> List[FaultyBackendCase]:
    # Counts are against the 16-entry reference table: 33 comparisons per run.
    return [
        # 1..pi and +infinity fail in both signs, plus the NaN check.
        FaultyBackendCase("fraction_only", fraction_only_split, 19, 1),
        # Every negative non-integer except the zero and one entries.
        FaultyBackendCase("floor", floor_split, 13, 0),
        FaultyBackendCase("nan_swallowing", nan_swallowing_split, 1, 1),
    ]


__all__ = [
    "FaultyBackendCase",
    "faulty_backend_cases",
    "floor_split",
    "fraction_only_split",
    "nan_swallowing_split",
]
