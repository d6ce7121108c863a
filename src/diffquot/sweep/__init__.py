"""Sweep subpackage."""

from diffquot.sweep.controller import iter_sweep, problem_sizes, run_sweep, validate_sweep_config
from diffquot.sweep.schema import (
    DifferenceUnderflow,
    Measurement,
    StepUnderflow,
    SweepConfig,
    SweepEvent,
)

__all__ = [
    "DifferenceUnderflow",
    "Measurement",
    "StepUnderflow",
    "SweepConfig",
    "SweepEvent",
    "iter_sweep",
    "problem_sizes",
    "run_sweep",
    "validate_sweep_config",
]
