#!/usr/bin/python3

import unittest
import sys
import os
from typing import List, Optional

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.join(PROJECT_ROOT, 'src')
TESTS_DIR = os.path.join(SRC_DIR, 'tests')


def discover_test_directories() -> List[str]:
    """
    Find all directories under src/tests that contain test files.
    Returned paths are relative to the src directory.
    """
    test_dirs = set()
    for root, _, files in os.walk(TESTS_DIR):
        if any(f.startswith('test_') and f.endswith('.py') for f in files):
            test_dirs.add(os.path.relpath(root, SRC_DIR))

    return sorted(test_dirs)


def run_test_suite(test_dirs: Optional[List[str]] = None) -> bool:
    """
    Run all discovered tests and return whether all tests passed.

    Args:
        test_dirs: Optional list of directories (relative to src) to search for tests.
                  If None, will discover all test directories.

    Returns:
        bool: True if all tests passed, False otherwise
    """
    if test_dirs is None:
        test_dirs = discover_test_directories()

    # Add src directory to Python path for imports
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)

    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for test_dir in test_dirs:
        abs_test_dir = os.path.join(SRC_DIR, test_dir)
        tests = loader.discover(abs_test_dir, pattern='test_*.py', top_level_dir=SRC_DIR)
        suite.addTests(tests)

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return result.wasSuccessful()


if __name__ == '__main__':
    # Allow specific test directories to be passed as arguments
    test_dirs = sys.argv[1:] if len(sys.argv) > 1 else None

    success = run_test_suite(test_dirs)
    sys.exit(0 if success else 1)
