"""Single vs double precision evaluation of the objective on random data."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from diffquot.data.generators import uniform_fill
from diffquot.objective.sum_of_squares import sum_of_squares
from diffquot.utils.precision import PRECISIONS


@dataclass(frozen=True)
class ComparisonConfig:
    capacity: int = 2048
    n: int = 12
    half_width: float = 1.0
    seed: int | None = None


def compare_precisions(rng: np.random.Generator, config: ComparisonConfig) -> dict[str, float]:
    """Fill one buffer per precision from ``rng`` and evaluate f on the first n entries.

    Buffers are drawn in registry order (single first), so the two runs see
    different samples.
    """
    if config.n < 0 or config.n > config.capacity:
        raise ValueError(f"n={config.n} must lie within capacity {config.capacity}")
    values: dict[str, float] = {}
    for name, precision in PRECISIONS.items():
        buffer = uniform_fill(rng, config.capacity, precision.dtype, config.half_width)
        values[name] = float(sum_of_squares(buffer, config.n))
    return values
