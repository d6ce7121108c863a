"""List or run a grid of sweeps over scale, precision and summation order."""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from diffquot.data.generators import scaled_sequence_fill
from diffquot.metrics.metrics import summarize
from diffquot.sweep.controller import run_sweep
from diffquot.sweep.schema import SweepConfig
from diffquot.utils.precision import resolve_precision


@dataclass(frozen=True)
class GridConfig:
    capacity: int = 20000
    gammas: tuple[float, ...] = (1.0, 100.0, 1.0 / 64)
    precisions: tuple[str, ...] = ("single", "double")
    orders: tuple[str, ...] = ("forward", "reverse")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List or run a grid of sweeps.")
    parser.add_argument("--list", action="store_true", help="List cases as JSONL")
    parser.add_argument("--run", action="store_true", help="Run matching cases")
    parser.add_argument("--filter", type=str, default="")
    parser.add_argument("--max-cases", type=int)
    return parser.parse_args(argv)


def _parse_filter(filter_str: str) -> dict[str, str]:
    if not filter_str:
        return {}
    parts = [part.strip() for part in filter_str.split(",") if part.strip()]
    out: dict[str, str] = {}
    for part in parts:
        if "=" not in part:
            continue
        key, value = part.split("=", 1)
        out[key.strip()] = value.strip()
    return out


def _matches(case: dict[str, object], filters: dict[str, str]) -> bool:
    for key, value in filters.items():
        if key not in case:
            return False
        if str(case[key]) != value:
            return False
    return True


def iter_grid(config: GridConfig) -> Iterable[dict[str, object]]:
    for precision in config.precisions:
        for gamma in config.gammas:
            for order in config.orders:
                yield {
                    "capacity": config.capacity,
                    "gamma": gamma,
                    "precision": precision,
                    "order": order,
                }


def run_case(case: dict[str, object]) -> list[dict[str, object]]:
    config = SweepConfig(
        capacity=int(case["capacity"]),
        gamma=float(case["gamma"]),
        precision=str(case["precision"]),
        order=str(case["order"]),
    )
    dtype = resolve_precision(config.precision).dtype
    buffer = scaled_sequence_fill(config.capacity, dtype, config.gamma)
    return summarize(run_sweep(buffer, config))


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    config = GridConfig()
    filters = _parse_filter(args.filter)

    cases = [case for case in iter_grid(config) if not filters or _matches(case, filters)]
    if args.max_cases is not None:
        cases = cases[: args.max_cases]

    if args.list or not args.run:
        for case in cases:
            print(json.dumps(case, sort_keys=True))
        return

    total = len(cases)
    for idx, case in enumerate(cases, start=1):
        print(f"Running case {idx}/{total} ({json.dumps(case, sort_keys=True)})")
        for row in run_case(case):
            print(json.dumps({**case, **row}, sort_keys=True))


if __name__ == "__main__":
    main()
