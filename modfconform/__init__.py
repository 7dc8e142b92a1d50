# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ryō

__version__ = "0.1.0"
from . import numerics
from .cases import REFERENCE_CASES, SplitCase, build_case, reference_cases
from .comparator import Verdict, compare, compare_nan
from .driver import RunReport, execute, run_conformance
from .numerics import BASE_EPSILON, SplitResult, math_split, scaled_tolerance, torch_split
from .reporting import FAIL, PASS, ConsoleEnvironment, HarnessEnvironment

__all__ = [
    "BASE_EPSILON",
    "ConsoleEnvironment",
    "FAIL",
    "HarnessEnvironment",
    "PASS",
    "REFERENCE_CASES",
    "RunReport",
    "SplitCase",
    "SplitResult",
    "Verdict",
    "build_case",
    "compare",
    "compare_nan",
    "execute",
    "math_split",
    "numerics",
    "reference_cases",
    "run_conformance",
    "scaled_tolerance",
    "torch_split",
    "__version__",
]
