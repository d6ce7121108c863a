"""Run sweep and comparison experiments from a YAML config."""

from __future__ import annotations

import argparse
import subprocess
import sys
import time
from pathlib import Path
from typing import Sequence

import yaml

SCRIPTS = {
    "sweep": "run_sweep.py",
    "comparison": "run_comparison.py",
}


def _format_flag(flag: str) -> str:
    return f"--{flag.replace('_', '-')}"


def _build_args(args: dict) -> list[str]:
    cli_args: list[str] = []
    for key, value in args.items():
        flag = _format_flag(key)
        if isinstance(value, bool):
            if value:
                cli_args.append(flag)
            continue
        cli_args.extend([flag, str(value)])
    return cli_args


def build_commands(config: dict) -> list[tuple[str, list[str]]]:
    runs = config.get("runs", [])
    if not isinstance(runs, list) or not runs:
        raise SystemExit("Config must contain a non-empty 'runs' list.")

    script_dir = Path(__file__).resolve().parent
    commands: list[tuple[str, list[str]]] = []
    for idx, run in enumerate(runs, start=1):
        name = run.get("name", f"run_{idx}")
        script = run.get("script", "sweep")
        if script not in SCRIPTS:
            raise SystemExit(f"Run '{name}' has unknown script '{script}'. Options: {', '.join(SCRIPTS)}")
        args_dict = run.get("args", {})
        if not isinstance(args_dict, dict):
            raise SystemExit(f"Run '{name}' must define an 'args' mapping.")
        cmd = [sys.executable, str(script_dir / SCRIPTS[script]), *_build_args(args_dict)]
        commands.append((name, cmd))
    return commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run experiments from YAML.")
    parser.add_argument("config", type=str, help="Path to YAML config.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print commands without executing them.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config_path = Path(args.config)
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")

    config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    commands = build_commands(config)
    for idx, (name, cmd) in enumerate(commands, start=1):
        print(f"Running {idx}/{len(commands)}: {name}")
        print("Command:", " ".join(cmd))
        if args.dry_run:
            continue
        start = time.perf_counter()
        subprocess.run(cmd, check=True)
        elapsed = time.perf_counter() - start
        print(f"Finished {name} in {elapsed:.2f}s")


if __name__ == "__main__":
    main()
