"""Telemetry and monitoring helpers for the test generator.

Exports:
    init_logfire: Configure Pydantic Logfire instrumentation.
    record_generation: Count a successful generation.
    record_invalid_input: Count a rejected JSON sample.
    record_copy: Count a clipboard copy outcome.
    print_summary: Output a summary of collected metrics.
    reset: Clear stored metrics.
"""

from .monitoring import init_logfire
from .telemetry import (
    print_summary,
    record_copy,
    record_generation,
    record_invalid_input,
    reset,
)

__all__ = [
    "init_logfire",
    "record_generation",
    "record_invalid_input",
    "record_copy",
    "print_summary",
    "reset",
]
