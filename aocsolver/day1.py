"""Historian Hysteria: distance and similarity between two location lists."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Iterable, Sequence

_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_pair(line: str) -> tuple[int, int] | None:
    """Read two leading integers from a line, or return None if there are not two."""
    first = _INT.match(line)
    if first is None:
        return None
    second = _INT.match(line, first.end())
    if second is None:
        return None
    return int(first.group(1)), int(second.group(1))


def parse_pairs(text: str) -> tuple[list[int], list[int]]:
    """Split the puzzle input into the left and right columns.

    Lines that do not start with two integers are ignored.
    """
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        pair = _leading_pair(line)
        if pair is not None:
            left.append(pair[0])
            right.append(pair[1])
    return left, right


def total_distance(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum the distances between the lists after sorting both."""
    ordered_left = sorted(left)
    ordered_right = sorted(right)
    if len(ordered_left) != len(ordered_right):
        raise ValueError("both lists must have the same length")
    return sum(abs(a - b) for a, b in zip(ordered_left, ordered_right))


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum each left value times the number of its occurrences in the right list."""
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare two lists of location IDs.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Error in opening the file", file=sys.stderr)
        return 1
    left, right = parse_pairs(text)
    print(f"Total Distance is = {total_distance(left, right)}")
    print(f"Similarity Score = {similarity_score(left, right)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())