#!/usr/bin/env python3
"""
Contract Runner

Runs the harness scenarios against a live bookstore server and prints a
pass/fail report. Exits non-zero if any scenario failed.

USAGE:
    export BOOKSTORE_BASE_URL=http://localhost:3030
    python scripts/run_contract.py
    python scripts/run_contract.py category_lifecycle book_lifecycle --seed 42
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from harness import create_context, get_harness_settings
from harness.scenarios import SCENARIOS, run_scenarios


def main() -> int:
    parser = argparse.ArgumentParser(description="Check a server against the bookstore contract")
    parser.add_argument(
        "scenarios",
        nargs="*",
        help=f"scenarios to run (default: all of {', '.join(SCENARIOS)})",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for generated titles")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every request")
    args = parser.parse_args()

    unknown = [name for name in args.scenarios if name not in SCENARIOS]
    if unknown:
        parser.error(f"unknown scenario(s): {', '.join(unknown)}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = get_harness_settings()
    print("=" * 60)
    print(f"Checking {settings.base_url}")
    print("=" * 60)

    outcomes = run_scenarios(create_context, names=args.scenarios or None, seed=args.seed)

    for outcome in outcomes:
        status = "PASS" if outcome.passed else "FAIL"
        print(f"  [{status}] {outcome.name}")
        if outcome.message:
            print(f"         {outcome.message}")

    failed = sum(not o.passed for o in outcomes)
    print("=" * 60)
    print(f"{len(outcomes) - failed} passed, {failed} failed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
