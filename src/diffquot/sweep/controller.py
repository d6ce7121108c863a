"""Sweep orchestration over step exponents k and problem sizes n."""

from __future__ import annotations

import itertools
import math
from typing import Callable, Iterator

import numpy as np

from diffquot.objective.sum_of_squares import SUMMATION_ORDERS
from diffquot.perturbation.forward import forward_difference_error
from diffquot.sweep.schema import (
    DifferenceUnderflow,
    Measurement,
    StepUnderflow,
    SweepConfig,
    SweepEvent,
)
from diffquot.utils.precision import resolve_precision, step_size


def validate_sweep_config(config: SweepConfig) -> None:
    resolve_precision(config.precision)
    if config.order not in SUMMATION_ORDERS:
        raise ValueError(f"Unknown summation order '{config.order}'")
    if config.capacity < 2:
        raise ValueError(f"Capacity must be at least 2, got {config.capacity}")
    if not math.isfinite(config.gamma) or config.gamma <= 0:
        raise ValueError(f"Scale gamma must be positive and finite, got {config.gamma}")
    if config.k_start < 0:
        raise ValueError(f"k_start must be non-negative, got {config.k_start}")
    if config.k_step < 1:
        raise ValueError(f"k_step must be at least 1, got {config.k_step}")
    if config.n_start < 1:
        raise ValueError(f"n_start must be at least 1, got {config.n_start}")
    if config.n_base < 2:
        raise ValueError(f"n_base must be at least 2, got {config.n_base}")


def problem_sizes(config: SweepConfig) -> list[int]:
    """Geometric sequence n_start, n_start*base, ... strictly below capacity."""
    sizes: list[int] = []
    n = config.n_start
    while n < config.capacity:
        sizes.append(n)
        n *= config.n_base
    return sizes


def iter_sweep(buffer: np.ndarray, config: SweepConfig) -> Iterator[SweepEvent]:
    """Yield one event per probe until the sweep finishes.

    The sweep finishes when 10^-k underflows, or when the difference vanishes
    at n = 1. A vanished difference at n > 1 only ends the current k.
    """
    validate_sweep_config(config)
    dtype = resolve_precision(config.precision).dtype
    if buffer.dtype != dtype:
        raise ValueError(f"Buffer dtype {buffer.dtype} does not match precision '{config.precision}'")
    if buffer.shape[0] < config.capacity:
        raise ValueError(f"Buffer of size {buffer.shape[0]} is smaller than capacity {config.capacity}")

    sizes = problem_sizes(config)
    for k in itertools.count(config.k_start, config.k_step):
        h = step_size(k, dtype)
        if h == 0:
            yield StepUnderflow(k=k)
            return
        for n in sizes:
            probe = forward_difference_error(buffer, n, h, config.gamma, config.order)
            if probe.vanished:
                yield DifferenceUnderflow(k=k, n=n)
                if n == 1:
                    return
                break
            yield Measurement(k=k, n=n, h=float(h), error=probe.error)


def run_sweep(
    buffer: np.ndarray,
    config: SweepConfig,
    emit: Callable[[SweepEvent], None] | None = None,
) -> list[SweepEvent]:
    events: list[SweepEvent] = []
    for event in iter_sweep(buffer, config):
        if emit is not None:
            emit(event)
        events.append(event)
    return events
