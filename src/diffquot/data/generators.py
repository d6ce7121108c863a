"""Sample buffer generators."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import numpy as np


def seed_from_clock() -> int:
    """Microsecond part of the current time of day."""
    return datetime.now().microsecond


def make_rng(seed: int | None = None) -> np.random.Generator:
    if seed is None:
        seed = seed_from_clock()
    return np.random.default_rng(seed)


def uniform_fill(
    rng: np.random.Generator,
    capacity: int,
    dtype: Any,
    half_width: float = 1.0,
) -> np.ndarray:
    """Draw ``capacity`` independent samples from U[-a, a] stored as ``dtype``."""
    if capacity < 0:
        raise ValueError(f"Capacity must be non-negative, got {capacity}")
    if half_width <= 0:
        raise ValueError(f"Half-width must be positive, got {half_width}")
    samples = rng.uniform(-half_width, half_width, size=capacity)
    return samples.astype(dtype)


def scaled_sequence_fill(capacity: int, dtype: Any, gamma: float = 1.0) -> np.ndarray:
    """Return x with x[i - 1] = i / gamma for i = 1..capacity, divided in ``dtype``."""
    if capacity < 0:
        raise ValueError(f"Capacity must be non-negative, got {capacity}")
    if gamma <= 0:
        raise ValueError(f"Scale gamma must be positive, got {gamma}")
    dtype = np.dtype(dtype)
    values = np.arange(1, capacity + 1).astype(dtype)
    return values / dtype.type(gamma)
