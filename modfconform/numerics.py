# SPDX-License-Identifier: MIT
"""Numerical primitives for validating ``modf``-style split functions.

The module bundles three things the rest of the harness builds on:

* **SplitResult** is the explicit pair returned by a split function.  The C
  convention returns the fractional part and writes the integral part through
  a pointer; here both halves travel together in one immutable value.
* **Tolerance policy.**  Binary64 carries roughly 15-17 significant decimal
  digits, so an absolute tolerance is only meaningful relative to the decimal
  magnitude of the expected value.  :func:`scaled_tolerance` starts from
  :data:`BASE_EPSILON` and shifts it one decade per decade of the expected
  value.  Infinite expectations demand an exact match.
* **Backends** are the implementations under test.  ``math`` goes through the
  platform libm via :func:`math.modf`; ``torch`` decomposes float64 tensors
  with :func:`torch.trunc`.
"""

from __future__ import annotations

import math
import sys
from typing import Callable, Dict, NamedTuple

import torch

__all__ = [
    "BACKENDS",
    "BASE_EPSILON",
    "NAN",
    "NEGINF",
    "POSINF",
    "SplitFunction",
    "SplitResult",
    "get_backend",
    "math_split",
    "scaled_tolerance",
    "torch_split",
]

# Binary64 machine epsilon is 2^-52, which is slightly too strict for libm
# implementations across platforms.  2^-50 is as tight as they reliably get.
BASE_EPSILON = 8.8817841970012523e-16

POSINF = float("inf")
NEGINF = float("-inf")
NAN = float("nan")


class SplitResult(NamedTuple):
    """Fractional and integral halves of a decomposed value."""

    fraction: float
    integral: float


SplitFunction = Callable[[float], SplitResult]


def scaled_tolerance(expected: float, base: float = BASE_EPSILON) -> float:
    """Return the absolute tolerance for ``expected``.

    ``0.0xxx`` expectations get ``base / 10``, ``0.xxx`` get ``base`` and
    ``x.xxx`` get ``base * 10``; every further decade scales by another factor
    of ten.  Zero uses ``base`` and an infinite expectation yields ``0.0``.
    A value sitting exactly on a decade boundary lands in the looser band.
    """

    if math.isnan(expected):
        raise ValueError("cannot derive a tolerance for a NaN expectation")
    if not math.isfinite(base) or base < 0.0:
        raise ValueError("base epsilon must be a non-negative, finite float")
    if math.isinf(expected):
        return 0.0
    magnitude = abs(expected)
    if magnitude == 0.0:
        return base
    decade = math.floor(math.log10(magnitude)) + 1
    if decade > sys.float_info.max_10_exp:
        return math.inf
    return base * 10.0 ** decade


def math_split(value: float) -> SplitResult:
    """Split ``value`` with the platform ``modf``."""

    fraction, integral = math.modf(value)
    return SplitResult(fraction, integral)


def torch_split(value: float) -> SplitResult:
    """Split ``value`` as a float64 tensor.

    ``value - trunc(value)`` is exact in binary64, but it turns infinities into
    NaN and loses the sign of zero, so both are patched back in from the input.
    """

    tensor = torch.tensor(float(value), dtype=torch.float64)
    integral = torch.trunc(tensor)
    fraction = torch.where(
        torch.isinf(tensor), torch.zeros_like(tensor), tensor - integral
    )
    fraction = torch.copysign(fraction, tensor)
    return SplitResult(float(fraction.item()), float(integral.item()))


BACKENDS: Dict[str, SplitFunction] = {
    "math": math_split,
    "torch": torch_split,
}


def get_backend(name: str) -> SplitFunction:
    """Look up a split implementation by name."""

    try:
        return BACKENDS[name]
    except KeyError:
        known = ", ".join(sorted(BACKENDS))
        raise KeyError(f"unknown backend {name!r}; expected one of: {known}") from None
