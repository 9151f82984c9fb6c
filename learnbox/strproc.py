"""Cleaning a phrase of punctuation and splitting it into words."""

from __future__ import annotations

import re
import sys

SAMPLE_PHRASE = (
    "Функция#  (strtok),  [выделяет],,,  **очередную.- {часть} /- /строки, "
    "на которую указывает  аргумент str!!!"
)
SEPARATOR = " "
PUNCTUATION = ".,!@#$^&*/\\%{}[]()-"


def strip_newline(line: str) -> str:
    """Remove one trailing newline, if present."""
    return line[:-1] if line.endswith("\n") else line


def delete_char(text: str, index: int) -> str:
    """Return ``text`` without the character at ``index``.

    An index outside ``0 <= index < len(text)`` leaves the text unchanged.
    """
    if 0 <= index < len(text):
        return text[:index] + text[index + 1 :]
    return text


def replace_chars(text: str, sep: str, chars: str) -> str:
    """Replace every character found in ``chars`` with the first character of ``sep``."""
    return text.translate(str.maketrans(chars, sep[0] * len(chars)))


def trim_separators(text: str, sep: str) -> str:
    """Collapse runs of the separator into one and drop trailing separators."""
    mark = sep[0]
    collapsed = re.sub(f"{re.escape(mark)}{{2,}}", mark, text)
    return collapsed.rstrip(mark)


def count_separators(text: str, sep: str) -> int:
    """Count occurrences of the first character of ``sep``."""
    return text.count(sep[0])


def split_words(text: str, sep: str, limit: int) -> list[str]:
    """Split on any character of ``sep``, keeping at most ``limit + 1`` words."""
    if not sep:
        words = [text] if text else []
    else:
        pattern = "[" + "".join(re.escape(char) for char in sep) + "]+"
        words = [word for word in re.split(pattern, text) if word]
    return words[: limit + 1]


def main(argv: list[str] | None = None) -> int:
    """Clean the sample phrase and print its words, one per line."""
    phrase = replace_chars(SAMPLE_PHRASE, SEPARATOR, PUNCTUATION)
    phrase = trim_separators(phrase, SEPARATOR)
    count = count_separators(phrase, SEPARATOR)
    words = split_words(phrase, SEPARATOR, count)
    for position in range(count + 1):
        word = words[position] if position < len(words) else "(null)"
        print(f"[{position:<2}][{word}]")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())