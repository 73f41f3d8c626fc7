#!/usr/bin/env python3
"""
Test runner for the URL shortener service.

Extra arguments are passed straight to pytest, e.g.
``python run_tests.py -k redirect``.
"""

import subprocess
import sys
import os


def run_tests(extra_args=None):
    """Run the test suite, returning pytest's exit code"""
    print("🧪 Running URL Shortener Tests")
    print("=" * 40)

    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    command = [sys.executable, "-m", "pytest", "tests/", "-v", "--tb=short"]
    command.extend(extra_args or [])

    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError as e:
        print(f"\n❌ Tests failed with exit code {e.returncode}")
        return e.returncode
    except FileNotFoundError:
        print("❌ pytest not found. Install with: pip install -e '.[test]'")
        return 1

    print("\n✅ All tests passed!")
    return 0


if __name__ == "__main__":
    sys.exit(run_tests(sys.argv[1:]))
