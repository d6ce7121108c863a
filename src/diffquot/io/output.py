"""Output helpers for sweep and comparison reports."""

from __future__ import annotations

import sys
from typing import TextIO

from diffquot.sweep.schema import DifferenceUnderflow, Measurement, StepUnderflow, SweepEvent


def format_event(event: SweepEvent) -> str:
    if isinstance(event, Measurement):
        return f"k: {event.k} n: {event.n} err {event.error:f}"
    if isinstance(event, DifferenceUnderflow):
        return f"difference underflown for k: {event.k} n: {event.n}"
    if isinstance(event, StepUnderflow):
        return f"underflow for 10^-{event.k}"
    raise TypeError(f"Unknown sweep event: {event!r}")


def format_best(measurement: Measurement) -> str:
    return f"best for n: {measurement.n} k: {measurement.k} err {measurement.error:e}"


def format_objective(value: float) -> str:
    return f"{value:.5f}"


def print_event(event: SweepEvent, stream: TextIO | None = None) -> None:
    print(format_event(event), file=stream or sys.stdout, flush=True)
