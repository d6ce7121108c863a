"""Objective subpackage."""

from diffquot.objective.sum_of_squares import SUMMATION_ORDERS, sum_of_squares

__all__ = [
    "SUMMATION_ORDERS",
    "sum_of_squares",
]
