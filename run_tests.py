#!/usr/bin/env python3
"""
run_tests.py
------------
Auto-test runner for Road Dodge.
Watches the package and tests for changes and reruns pytest.

Usage:
    python run_tests.py                    # Start watching for changes
    python run_tests.py --run-once         # Run tests once and exit
    python run_tests.py --core-only        # Only the frame-logic tests
"""

import sys
import time
import subprocess
import argparse
from pathlib import Path

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler

WATCHED_DIRS = ("road_dodge", "tests")
CORE_TESTS = [
    "tests/core/test_input_manager.py",
    "tests/systems/test_kinematics.py",
    "tests/systems/test_health_tracker.py",
    "tests/systems/test_game_logic.py",
]


class TestRunner(FileSystemEventHandler):
    """File system event handler that runs tests on file changes."""

    def __init__(self, args):
        self.args = args
        self.last_run = 0
        self.debounce_time = 1.0
        self.project_root = Path(__file__).parent

    def on_modified(self, event):
        """Rerun tests when a watched source file changes."""
        if event.is_directory:
            return

        file_path = Path(event.src_path)
        if file_path.suffix not in (".py", ".json", ".yaml"):
            return
        if not any(directory in file_path.parts for directory in WATCHED_DIRS):
            return

        current_time = time.time()
        if current_time - self.last_run < self.debounce_time:
            return

        self.last_run = current_time
        self.run_tests()

    def run_tests(self):
        """Run the test suite. Returns True if it passed."""
        print("\n" + "=" * 60)
        print("Running tests...")
        print("=" * 60)

        cmd = [sys.executable, "-m", "pytest"]
        cmd.extend(CORE_TESTS if self.args.core_only else [])
        cmd.append("-v")

        if self.args.coverage:
            cmd.extend([
                "--cov=road_dodge",
                "--cov-report=term-missing",
            ])

        try:
            result = subprocess.run(cmd, cwd=self.project_root)
        except KeyboardInterrupt:
            print("\nTest execution interrupted")
            return False

        print("All tests passed!" if result.returncode == 0 else "Some tests failed!")
        return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(description="Auto-test runner for Road Dodge")
    parser.add_argument("--run-once", action="store_true",
                        help="Run tests once and exit")
    parser.add_argument("--core-only", action="store_true",
                        help="Run only the frame-logic tests")
    parser.add_argument("--coverage", action="store_true",
                        help="Generate coverage report (needs pytest-cov)")
    args = parser.parse_args()

    test_runner = TestRunner(args)

    if args.run_once:
        return 0 if test_runner.run_tests() else 1

    print("Starting file watcher...")
    print(f"Monitoring: {', '.join(WATCHED_DIRS)}")
    print("Press Ctrl+C to stop")

    test_runner.run_tests()

    observer = Observer()
    for directory in WATCHED_DIRS:
        path = test_runner.project_root / directory
        if path.is_dir():
            observer.schedule(test_runner, str(path), recursive=True)

    observer.start()
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
        print("\nFile watcher stopped")

    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
