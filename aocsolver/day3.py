"""Mull It Over: add up the valid multiplications in corrupted memory."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

_INSTRUCTION = re.compile(
    r"(?P<disable>don't\(\))"
    r"|(?P<enable>do\(\))"
    r"|mul\([^\S\n]*(?P<a>[+-]?\d+),[^\S\n]*(?P<b>[+-]?\d+)\)"
)


def sum_multiplications(text: str, conditional: bool = False) -> int:
    """Sum the products of every valid mul(a,b) in the text.

    With conditional set, don't() switches multiplications off and do()
    switches them back on; they start switched on.
    """
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        if match.group("disable"):
            if conditional:
                enabled = False
        elif match.group("enable"):
            if conditional:
                enabled = True
        elif enabled:
            total += int(match.group("a")) * int(match.group("b"))
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum multiplications in corrupted memory.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Error in opening the file", file=sys.stderr)
        return 1
    print(f"Total = {sum_multiplications(text)}")
    print(f"Total (conditional) = {sum_multiplications(text, conditional=True)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())