#!/usr/bin/env python3
"""
Test runner script for Travel Bot.

This script provides convenient commands for running different types of tests.
"""

import sys
import subprocess
import argparse


def run_command(cmd, description):
    """Run a command and report whether it succeeded."""
    print(f"\n{description}")
    print("=" * 50)

    try:
        subprocess.run(cmd, shell=True, check=True)
    except subprocess.CalledProcessError as e:
        print(f"{description} failed with exit code {e.returncode}")
        return False
    print(f"{description} completed successfully")
    return True


def main():
    """Main test runner function."""
    parser = argparse.ArgumentParser(description="Travel Bot Test Runner")
    parser.add_argument(
        "test_type",
        choices=["unit", "all", "interpreter", "coverage"],
        help="Type of tests to run"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Run tests in verbose mode"
    )

    args = parser.parse_args()

    base_cmd = "python -m pytest"
    if args.verbose:
        base_cmd += " -v"

    commands = {
        "unit": f"{base_cmd} tests/unit/",
        "all": f"{base_cmd} tests/",
        "interpreter": f"{base_cmd} tests/unit/test_interpreter.py -v",
        "coverage": f"{base_cmd} tests/ --cov=travelbot --cov-report=html --cov-report=term"
    }

    if not run_command(commands[args.test_type], f"Running {args.test_type} tests"):
        sys.exit(1)


if __name__ == "__main__":
    main()
