"""Forward-difference error of the first gradient component."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from diffquot.objective.sum_of_squares import sum_of_squares

ANALYTIC_DERIVATIVE = 2.0


@dataclass(frozen=True)
class Probe:
    """Objective values around x_1 = 1/gamma and the resulting error.

    ``error`` is None when f_plus - f_minus rounded to exactly zero.
    """

    f_plus: float
    f_minus: float
    diff: float
    error: float | None

    @property
    def vanished(self) -> bool:
        return self.error is None


def forward_difference_error(
    buffer: np.ndarray,
    n: int,
    h: float,
    gamma: float = 1.0,
    order: str = "forward",
) -> Probe:
    """Evaluate [f(x + h*e_1) - f(x)]/h - 2 with x_1 stored as 1/gamma.

    Position 0 of ``buffer`` is overwritten and left at 1/gamma. All
    arithmetic stays in the buffer dtype.
    """
    if n < 1:
        raise ValueError(f"Problem size must include the perturbed coordinate, got n={n}")
    scalar = buffer.dtype.type
    h = scalar(h)
    if h == 0:
        raise ValueError("Step size is zero")
    gamma = scalar(gamma)
    one = scalar(1.0)

    buffer[0] = (one + h) / gamma
    f_plus = sum_of_squares(buffer, n, order)
    buffer[0] = one / gamma
    f_minus = sum_of_squares(buffer, n, order)

    diff = (f_plus - f_minus) * (gamma * gamma)
    if diff == 0:
        return Probe(f_plus=float(f_plus), f_minus=float(f_minus), diff=0.0, error=None)
    error = diff / h - scalar(ANALYTIC_DERIVATIVE)
    return Probe(
        f_plus=float(f_plus),
        f_minus=float(f_minus),
        diff=float(diff),
        error=float(error),
    )
