# SPDX-License-Identifier: MIT
"""Command-line entry point for split conformance runs."""

from __future__ import annotations

import argparse
import json
import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from .cases import reference_cases
from .driver import execute
from .numerics import BACKENDS, BASE_EPSILON, get_backend
from .reporting import ConsoleEnvironment


@dataclass(frozen=True)
class HarnessConfig:
    """Options controlling a single conformance run."""

    backend: str = "math"
    epsilon: float = BASE_EPSILON
    json: bool = False
    csv_path: Optional[str] = None
    verbose: bool = False


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: {text!r}") from None
    if not math.isfinite(value) or value <= 0.0:
        raise argparse.ArgumentTypeError("epsilon must be a positive, finite float")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modf-conformance",
        description="Validate a modf implementation against reference values.",
    )
    parser.add_argument(
        "--backend",
        choices=sorted(BACKENDS),
        default="math",
        help="Split implementation to validate.",
    )
    parser.add_argument(
        "--epsilon",
        type=_positive_float,
        default=BASE_EPSILON,
        help="Base epsilon the table tolerances are scaled from.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON summary instead of the plain-text report.",
    )
    parser.add_argument(
        "--csv",
        dest="csv_path",
        default=None,
        help="Write the failure history to this CSV file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print one line per comparison.",
    )
    return parser


def parse_config(argv: Sequence[str] | None = None) -> HarnessConfig:
    args = build_parser().parse_args(argv)
    return HarnessConfig(
        backend=args.backend,
        epsilon=args.epsilon,
        json=args.json,
        csv_path=args.csv_path,
        verbose=args.verbose,
    )


def main(argv: Sequence[str] | None = None) -> int:
    raw_argv = list(sys.argv[1:] if argv is None else argv)
    config = parse_config(raw_argv)
    environment = ConsoleEnvironment()
    split = get_backend(config.backend)

    status, report = execute(
        split, environment, raw_argv, reference_cases(config.epsilon)
    )
    if not environment.initialized:
        return status

    if config.verbose:
        for verdict in report.verdicts:
            outcome = "ok  " if verdict.passed else "FAIL"
            print(
                f"{outcome} modf({verdict.value!r}) -> "
                f"({verdict.actual.fraction!r}, {verdict.actual.integral!r})"
            )

    if config.csv_path:
        environment.export_csv(config.csv_path)

    if config.json:
        summary: dict[str, object] = {
            "backend": config.backend,
            "epsilon": config.epsilon,
            "status": "pass" if status == 0 else "fail",
            "run": report.summary(),
            "environment": environment.summary(),
        }
        print(json.dumps(summary, indent=2, sort_keys=True))
    else:
        stats = report.summary()
        print(
            f"[{config.backend}] {int(stats['passed'])}/{int(stats['comparisons'])} "
            f"comparisons passed"
        )
        if environment.failure_count:
            print(environment.report())
    return status


if __name__ == "__main__":
    raise SystemExit(main())
