"""Perturbation subpackage."""

from diffquot.perturbation.forward import ANALYTIC_DERIVATIVE, Probe, forward_difference_error

__all__ = [
    "ANALYTIC_DERIVATIVE",
    "Probe",
    "forward_difference_error",
]
