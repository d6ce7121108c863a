"""Precision selection helpers for single/double floating point runs."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any

import numpy as np


@dataclass(frozen=True)
class Precision:
    name: str
    dtype: Any


PRECISIONS: dict[str, Precision] = {
    "single": Precision(name="single", dtype=np.dtype(np.float32)),
    "double": Precision(name="double", dtype=np.dtype(np.float64)),
}


def resolve_precision(name: str) -> Precision:
    """Look up a precision variant by name."""
    precision = PRECISIONS.get(name)
    if precision is None:
        raise ValueError(f"Unknown precision '{name}'. Expected 'single' or 'double'.")
    return precision


def list_precisions() -> list[str]:
    return list(PRECISIONS.keys())


def machine_epsilon(dtype: Any) -> float:
    return float(np.finfo(dtype).eps)


def step_size(k: int, dtype: Any) -> np.floating:
    """Return h = 10^-k rounded into ``dtype``; zero once it underflows."""
    return np.dtype(dtype).type(10.0 ** -k)


def difference_underflow_bound(dtype: Any) -> int:
    """Largest k at which f(x + h*e_1) - f(x) may still survive for n = 1.

    Past this exponent h < eps/2, so 1 + h rounds back to 1 and the forward
    difference is exactly zero.
    """
    eps = machine_epsilon(dtype)
    return int(math.floor(-math.log10(eps / 2))) + 1


def step_underflow_bound(dtype: Any) -> int:
    k = 0
    while step_size(k, dtype) != 0:
        k += 1
    return k
