# SPDX-License-Identifier: MIT
"""Aggregate generation metrics for end-of-run reporting."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class RunMetrics:
    """Counters collected while the process runs."""

    generated: int = 0
    invalid_inputs: int = 0
    fields: int = 0
    copies: int = 0
    copy_failures: int = 0

    def add_generation(self, *, fields: int) -> None:
        """Update metrics with a successful generation."""

        self.generated += 1
        self.fields += fields


_metrics = RunMetrics()


def record_generation(*, fields: int) -> None:
    """Record a successful generation covering ``fields`` fields."""

    _metrics.add_generation(fields=fields)


def record_invalid_input() -> None:
    """Record a rejected JSON sample."""

    _metrics.invalid_inputs += 1


def record_copy(success: bool) -> None:
    """Record the outcome of a clipboard copy."""

    if success:
        _metrics.copies += 1
    else:
        _metrics.copy_failures += 1


def snapshot() -> RunMetrics:
    """Return a copy of the current counters."""

    return RunMetrics(**vars(_metrics))


def reset() -> None:
    """Clear all recorded metrics."""

    global _metrics
    _metrics = RunMetrics()


def print_summary() -> None:
    """Write a summary of collected metrics to ``stderr``."""

    data = _metrics
    if not (data.generated or data.invalid_inputs or data.copies or data.copy_failures):
        return
    print(
        f"generated={data.generated} fields={data.fields} "
        f"invalid_inputs={data.invalid_inputs} copies={data.copies} "
        f"copy_failures={data.copy_failures}",
        file=sys.stderr,
    )


__all__ = [
    "RunMetrics",
    "print_summary",
    "record_copy",
    "record_generation",
    "record_invalid_input",
    "reset",
    "snapshot",
]
