#!/usr/bin/env python3
"""Run the backend test suite for the grammar checker.

Usage: python3 run_tests.py [pytest args...]
"""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
TESTS_DIR = ROOT / "backend" / "tests"


def run_backend_tests(extra_args: list[str]) -> int:
    print("Running backend tests...\n")
    result = subprocess.run(
        [sys.executable, "-m", "pytest", str(TESTS_DIR), "-v", *extra_args],
        cwd=str(ROOT),
    )
    return result.returncode


def main() -> int:
    rc = run_backend_tests(sys.argv[1:])
    if rc != 0:
        print("\nSome tests failed.")
        return 1

    print("\nAll tests passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
