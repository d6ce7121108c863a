"""Schema definitions for sweep inputs and events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SweepConfig:
    """Parameters of a step-size / problem-size sweep."""

    capacity: int = 1024
    gamma: float = 100.0
    precision: str = "double"
    k_start: int = 0
    k_step: int = 1
    n_start: int = 1
    n_base: int = 10
    order: str = "forward"


@dataclass(frozen=True)
class Measurement:
    """Signed forward-difference error for one (k, n)."""

    k: int
    n: int
    h: float
    error: float


@dataclass(frozen=True)
class DifferenceUnderflow:
    """f(x + h*e_1) - f(x) rounded to zero at (k, n)."""

    k: int
    n: int


@dataclass(frozen=True)
class StepUnderflow:
    """10^-k rounded to zero in the active precision."""

    k: int


SweepEvent = Union[Measurement, DifferenceUnderflow, StepUnderflow]
