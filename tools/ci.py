#!/usr/bin/env python3
# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the HydraLink CI checks locally.

Usage::

    python tools/ci.py              # every step
    python tools/ci.py --fail-fast  # stop at the first failing step
    python tools/ci.py --only Tests
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=hydralink", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run the selected CI steps and print a summary."""
    parser = argparse.ArgumentParser(description="Run the HydraLink CI checks")
    parser.add_argument("--fail-fast", action="store_true", help="Stop after the first failing step")
    parser.add_argument(
        "--only",
        action="append",
        choices=[name for name, _ in STEPS],
        help="Run only the named step; may be repeated",
    )
    args = parser.parse_args()

    selected = [(name, cmd) for name, cmd in STEPS if not args.only or name in args.only]
    results: list[tuple[str, bool, float]] = []
    for name, cmd in selected:
        passed, elapsed = _run_step(name, cmd)
        results.append((name, passed, elapsed))
        if not passed and args.fail_fast:
            break

    _print_summary(results, skipped=len(selected) - len(results))
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_RULE = "=" * 60


def _run_step(name: str, cmd: list[str]) -> tuple[bool, float]:
    print(f"\n{chalk.blue(_RULE)}\n{chalk.blue(name)}: {' '.join(cmd)}\n{chalk.blue(_RULE)}")
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=Path(__file__).resolve().parent.parent)
    return proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]], skipped: int) -> None:
    print(f"\n{chalk.blue(_RULE)}\n{chalk.blue('  Summary')}\n{chalk.blue(_RULE)}")
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        print(color(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    if skipped:
        print(chalk.yellow(f"  SKIP  {skipped} step(s) after the first failure"))
    print()


if __name__ == "__main__":
    sys.exit(main())
