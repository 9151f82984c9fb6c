"""Interactive conversion of binary strings to decimal numbers."""

from __future__ import annotations

import sys
from dataclasses import dataclass

MAX_BITS = 64
"""Longest binary number that is read; extra characters are discarded."""

PROMPT = f"\nВведите двоичное число (максимум {MAX_BITS}bit). Для выхода введите 'q': "
QUIT = "q"


@dataclass(frozen=True)
class BinaryReading:
    """A parsed binary number: its bit count, normalised digits and value."""

    bits: int
    digits: str
    value: int


def parse_binary(text: str) -> BinaryReading:
    """Parse one line of input as a binary number.

    Only the first line and at most ``MAX_BITS`` characters are used.
    Every character other than ``'1'`` counts as ``'0'``.
    """
    line = text.partition("\n")[0][:MAX_BITS]
    digits = "".join("1" if char == "1" else "0" for char in line)
    value = int(digits, 2) if digits else 0
    return BinaryReading(bits=len(digits), digits=digits, value=value)


def main(argv: list[str] | None = None) -> int:
    """Read binary numbers from standard input until 'q' is entered."""
    while True:
        print(PROMPT, end="", flush=True)
        try:
            line = input()
        except EOFError:
            return 0
        if line[:1] == QUIT:
            print("Exit")
            return 0
        reading = parse_binary(line)
        print(
            f"\nДвоичное: [{reading.bits}bit] [{reading.digits}]\n"
            f"Десятичное: {reading.value}"
        )


if __name__ == "__main__":
    sys.exit(main())