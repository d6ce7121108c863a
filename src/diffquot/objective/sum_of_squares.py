"""Sum-of-squares objective evaluated in the buffer's own precision."""

from __future__ import annotations

import numpy as np

SUMMATION_ORDERS = ("forward", "reverse")


def _indices(n: int, order: str) -> range:
    if order == "forward":
        return range(n)
    if order == "reverse":
        return range(n - 1, -1, -1)
    raise ValueError(f"Unknown summation order '{order}'. Expected 'forward' or 'reverse'.")


def sum_of_squares(x: np.ndarray, n: int, order: str = "forward") -> np.floating:
    """Return sum(x[i]**2 for i < n) accumulated one term at a time.

    The accumulator has the dtype of ``x`` and every partial sum is rounded
    to it, so float32 buffers are summed in float32. ``np.sum`` is avoided on
    purpose: it reduces pairwise and would change the rounding under study.
    """
    if n < 0 or n > x.shape[0]:
        raise ValueError(f"Prefix length {n} outside buffer of size {x.shape[0]}")
    result = x.dtype.type(0.0)
    for i in _indices(n, order):
        x_i = x[i]
        result += x_i * x_i
    return result
