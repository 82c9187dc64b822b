#!/usr/bin/env python3
"""
Test runner for the JSON enum validator.

This script runs all tests for the JSON enum validator or a specific subset.
"""

import argparse
import pytest
import sys
from pathlib import Path


CATEGORIES = {
    "canonical": "canonical_test.py",
    "comparator": "comparator_test.py",
    "enum": "enum_constraint_test.py",
    "basic": "basic_validation_test.py",
    "utils": "utils_test.py",
}


def parse_args():
    parser = argparse.ArgumentParser(description="Run tests for the JSON enum validator")
    parser.add_argument(
        "--category", "-c",
        choices=sorted(CATEGORIES) + ["all"],
        default="all",
        help="Test category to run"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--file", "-f",
        type=str,
        help="Run a specific test file"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    # Determine which tests to run
    test_dir = Path(__file__).parent.joinpath("tests")
    pytest_args = ["-xvs"] if args.verbose else []

    if args.file:
        # Run a specific test file
        test_file = test_dir / args.file
        if not test_file.exists():
            print(f"Test file not found: {test_file}")
            return 1
        pytest_args.append(str(test_file))
    else:
        # Run tests by category
        for category, filename in CATEGORIES.items():
            if args.category == category or args.category == "all":
                pytest_args.append(str(test_dir / filename))

    print(f"Running tests: {' '.join(pytest_args)}")

    return pytest.main(pytest_args)


if __name__ == "__main__":
    sys.exit(main())
