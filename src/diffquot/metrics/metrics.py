"""Sweep summary calculations."""

from __future__ import annotations

from typing import Any, Iterable

from diffquot.sweep.schema import DifferenceUnderflow, Measurement, SweepEvent


def best_approximations(events: Iterable[SweepEvent]) -> dict[int, Measurement]:
    best: dict[int, Measurement] = {}
    for event in events:
        if not isinstance(event, Measurement):
            continue
        current = best.get(event.n)
        if current is None or abs(event.error) < abs(current.error):
            best[event.n] = event
    return best


def difference_underflow_ks(events: Iterable[SweepEvent]) -> dict[int, int]:
    first: dict[int, int] = {}
    for event in events:
        if isinstance(event, DifferenceUnderflow) and event.n not in first:
            first[event.n] = event.k
    return first


def summarize(events: Iterable[SweepEvent]) -> list[dict[str, Any]]:
    events = list(events)
    best = best_approximations(events)
    underflow = difference_underflow_ks(events)
    rows: list[dict[str, Any]] = []
    for n in sorted(set(best) | set(underflow)):
        measurement = best.get(n)
        rows.append(
            {
                "n": n,
                "best_k": measurement.k if measurement else None,
                "best_error": measurement.error if measurement else None,
                "underflow_k": underflow.get(n),
            }
        )
    return rows
