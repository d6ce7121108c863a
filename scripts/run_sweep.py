"""Entry point for the forward-difference step-size sweep."""

from __future__ import annotations

import argparse
from typing import Sequence

from diffquot.data.generators import scaled_sequence_fill
from diffquot.io.output import format_best, print_event
from diffquot.metrics.metrics import best_approximations
from diffquot.objective.sum_of_squares import SUMMATION_ORDERS
from diffquot.sweep.controller import run_sweep
from diffquot.sweep.schema import SweepConfig
from diffquot.utils.precision import list_precisions, resolve_precision

DEFAULTS = SweepConfig()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sweep h = 10^-k and n = base^j for f(x) = sum x_i^2.")
    parser.add_argument("--capacity", type=int, default=DEFAULTS.capacity, help="Buffer capacity N.")
    parser.add_argument("--gamma", type=float, default=DEFAULTS.gamma, help="Prescaling factor.")
    parser.add_argument("--precision", choices=list_precisions(), default=DEFAULTS.precision)
    parser.add_argument("--k-start", type=int, default=DEFAULTS.k_start)
    parser.add_argument("--k-step", type=int, default=DEFAULTS.k_step)
    parser.add_argument("--n-start", type=int, default=DEFAULTS.n_start)
    parser.add_argument("--n-base", type=int, default=DEFAULTS.n_base)
    parser.add_argument("--order", choices=SUMMATION_ORDERS, default=DEFAULTS.order)
    parser.add_argument(
        "--best",
        action="store_true",
        help="Print the most accurate measurement per n after the sweep.",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SweepConfig:
    return SweepConfig(
        capacity=args.capacity,
        gamma=args.gamma,
        precision=args.precision,
        k_start=args.k_start,
        k_step=args.k_step,
        n_start=args.n_start,
        n_base=args.n_base,
        order=args.order,
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(args)

    dtype = resolve_precision(config.precision).dtype
    try:
        buffer = scaled_sequence_fill(config.capacity, dtype, config.gamma)
        events = run_sweep(buffer, config, emit=print_event)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if args.best:
        best = best_approximations(events)
        for n in sorted(best):
            print(format_best(best[n]))


if __name__ == "__main__":
    main()
