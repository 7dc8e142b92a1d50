# SPDX-License-Identifier: MIT
"""Environment services around a conformance run.

A run talks to three services: initialization before any comparison, a
failure sink that records one diagnostic per failing comparison, and a
finalization call once everything has executed.  :class:`ConsoleEnvironment`
provides all three on top of stdout/stderr and keeps a rolling history of the
recorded failures so callers can summarise or export them afterwards.
"""

from __future__ import annotations

import csv
import math
import sys
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence, TextIO, Tuple

__all__ = [
    "FAIL",
    "PASS",
    "ConsoleEnvironment",
    "FailureRecord",
    "HarnessEnvironment",
]

PASS = 0
FAIL = 1


class HarnessEnvironment(Protocol):
    """Services a conformance run depends on."""

    def initialize(self, argv: Sequence[str]) -> bool:
        """Prepare the environment. Returns False if the run cannot proceed."""
        ...

    def report_failure(self, message: str, *values: float) -> None:
        """Record a failing comparison. Must not raise."""
        ...

    def terminate(self) -> None:
        """Release environment resources after the run."""
        ...


@dataclass
class FailureRecord:
    """Snapshot of a single reported failure."""

    timestamp: float
    message: str
    values: Tuple[float, ...] = ()


def _is_binary64() -> bool:
    info = sys.float_info
    return (
        info.mant_dig == 53
        and info.epsilon == 2.0 ** -52
        and math.isinf(float("inf"))
        and math.isnan(float("nan"))
    )


class ConsoleEnvironment:
    """Console-backed environment with a bounded failure history."""

    def __init__(
        self,
        *,
        history_limit: int = 512,
        stream: Optional[TextIO] = None,
        float_check=_is_binary64,
    ) -> None:
        self.history_limit = max(0, history_limit)
        self._stream = stream
        self._float_check = float_check
        self._history: List[FailureRecord] = []
        self.failure_count = 0
        self.argv: Tuple[str, ...] = ()
        self.initialized = False
        self.terminated = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self, argv: Sequence[str]) -> bool:
        if self.initialized:
            print("environment already initialized", file=self.stream)
            return False
        if not self._float_check():
            print("float is not IEEE-754 binary64; refusing to run", file=self.stream)
            return False
        self.argv = tuple(argv)
        self.initialized = True
        return True

    def report_failure(self, message: str, *values: float) -> None:
        self.failure_count += 1
        print(f"FAIL: {message}", file=self.stream)

        if self.history_limit == 0:
            return
        record = FailureRecord(timestamp=time.time(), message=message, values=tuple(values))
        self._history.append(record)
        if len(self._history) > self.history_limit:
            self._history.pop(0)

    def terminate(self) -> None:
        self.terminated = True

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def failures(self) -> List[FailureRecord]:
        return list(self._history)

    def summary(self) -> Dict[str, float]:
        return {
            "failures": float(self.failure_count),
            "recorded": float(len(self._history)),
            "initialized": 1.0 if self.initialized else 0.0,
            "terminated": 1.0 if self.terminated else 0.0,
        }

    def report(self) -> str:
        if not self.failure_count:
            return "No failures recorded."
        lines = [
            "Conformance Failures",
            "--------------------",
            f"Failures reported : {self.failure_count}",
        ]
        lines.extend(f"  {record.message}" for record in self._history)
        return "\n".join(lines)

    def export_csv(self, path: str) -> None:
        """Persist the failure history to a CSV file."""

        fieldnames = [
            "timestamp",
            "value",
            "actual_fraction",
            "actual_integral",
            "expected_fraction",
            "expected_integral",
            "message",
        ]
        with open(path, "w", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=fieldnames)
            writer.writeheader()
            for record in self._history:
                row: Dict[str, object] = {"timestamp": record.timestamp, "message": record.message}
                row.update(zip(fieldnames[1:6], (repr(v) for v in record.values)))
                writer.writerow(row)
