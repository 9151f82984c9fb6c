"""The classic greeting."""

from __future__ import annotations

import argparse
import sys


def greeting() -> str:
    """Return the greeting text."""
    return "Hello, World!"


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and print the greeting."""
    parser = argparse.ArgumentParser(description="Print a greeting.")
    parser.parse_args(argv)
    sys.stdout.write(greeting() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())