#!/usr/bin/env python3
"""Run all example scripts and report results.

Each example runs in a subprocess with ENV_EXTRACT_LOG_LEVEL raised to
ERROR so only the example's own output is shown. Every example runs even
after a failure; the exit code reports whether any failed.
"""

import os
import subprocess
import sys
from pathlib import Path

TIMEOUT_SECONDS = 30


def find_examples(examples_dir: Path) -> list[Path]:
    """Find all example Python files, sorted by name."""
    return sorted(f for f in examples_dir.glob("*.py") if f.name != "__init__.py")


def example_environment() -> dict[str, str]:
    """Process environment for examples, with quiet logging."""
    env = dict(os.environ)
    env["ENV_EXTRACT_LOG_LEVEL"] = "ERROR"
    return env


def run_example(example_path: Path, env: dict[str, str]) -> bool:
    """Run a single example script.

    Returns:
        True if example succeeded, False otherwise
    """
    print(f"Running: {example_path.name}...", flush=True)

    try:
        result = subprocess.run(
            [sys.executable, str(example_path)],
            capture_output=True,
            text=True,
            timeout=TIMEOUT_SECONDS,
            env=env,
        )
    except subprocess.TimeoutExpired:
        print(f"✗ {example_path.name} TIMED OUT (>{TIMEOUT_SECONDS}s)")
        return False

    if result.returncode != 0:
        print(f"✗ {example_path.name} FAILED (exit code {result.returncode})")
        if result.stderr:
            print(result.stderr)
        return False

    print(f"✓ {example_path.name}")
    if result.stdout:
        print(result.stdout)
    return True


def main() -> int:
    """Main entry point.

    Returns:
        0 if all examples passed, 1 if any failed
    """
    examples_dir = Path(__file__).parent.parent / "examples"
    examples = find_examples(examples_dir)
    if not examples:
        print(f"Warning: No example files found in {examples_dir}")
        return 0

    env = example_environment()
    failed = [example.name for example in examples if not run_example(example, env)]

    print("=" * 60)
    if failed:
        print(f"{len(failed)}/{len(examples)} example(s) failed: {', '.join(failed)}")
        return 1
    print(f"All {len(examples)} example(s) passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
