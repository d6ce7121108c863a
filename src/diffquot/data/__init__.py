"""Data generation subpackage."""

from diffquot.data.generators import make_rng, scaled_sequence_fill, seed_from_clock, uniform_fill

__all__ = [
    "make_rng",
    "scaled_sequence_fill",
    "seed_from_clock",
    "uniform_fill",
]
