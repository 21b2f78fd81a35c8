"""Reading a text file line by line and appending to it."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

PathLike = Union[str, Path]

DEFAULT_PATH = "thefile.txt"
NEW_LINE_TEXT = "This is new line"


def read_lines(path: PathLike) -> list[str]:
    """The file's lines without their newlines; an empty list if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def append_text(path: PathLike, text: str) -> None:
    """Append ``text`` to the file as it is, creating the file if needed."""
    with open(path, "a", encoding="utf-8", newline="") as handle:
        handle.write(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the file's lines, then append a fixed line of text to it."""
    parser = argparse.ArgumentParser(description="Print a file, then append to it.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    for line in read_lines(args.path):
        print(line)
    append_text(args.path, NEW_LINE_TEXT)
    return 0


if __name__ == "__main__":
    sys.exit(main())