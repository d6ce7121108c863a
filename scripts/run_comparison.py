"""Evaluate f on uniform random data in single and double precision."""

from __future__ import annotations

import argparse
from typing import Sequence

from diffquot.data.generators import make_rng
from diffquot.experiments.comparison import ComparisonConfig, compare_precisions
from diffquot.io.output import format_objective

DEFAULTS = ComparisonConfig()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare f(x) = sum x_i^2 in float32 and float64.")
    parser.add_argument("--capacity", type=int, default=DEFAULTS.capacity)
    parser.add_argument("--n", type=int, default=DEFAULTS.n, help="Number of summed elements.")
    parser.add_argument("--half-width", type=float, default=DEFAULTS.half_width)
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULTS.seed,
        help="RNG seed; defaults to the microsecond part of the clock.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    config = ComparisonConfig(
        capacity=args.capacity,
        n=args.n,
        half_width=args.half_width,
        seed=args.seed,
    )
    rng = make_rng(config.seed)
    try:
        values = compare_precisions(rng, config)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    print(format_objective(values["single"]))
    print(format_objective(values["double"]))


if __name__ == "__main__":
    main()
