"""Red-Nosed Reports: decide which reactor reports are safe."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence

_LEADING_INT = re.compile(r"[+-]?\d+")
_MAX_STEP = 3


def parse_reports(text: str) -> list[list[int]]:
    """Parse one report per line; reading a line stops at its first non-numeric field.

    Lines without any leading number are left out.
    """
    reports: list[list[int]] = []
    for line in text.splitlines():
        levels: list[int] = []
        for field in line.split():
            match = _LEADING_INT.match(field)
            if match is None:
                break
            levels.append(int(match.group()))
        if levels:
            reports.append(levels)
    return reports


def is_safe(levels: Sequence[int]) -> bool:
    """A report is safe if it strictly moves one way in steps of 1 to 3."""
    if len(levels) < 2:
        return True
    steps = [b - a for a, b in zip(levels, levels[1:])]
    if any(step == 0 for step in steps):
        return False
    increasing = steps[0] > 0
    return all((step > 0) == increasing and abs(step) <= _MAX_STEP for step in steps)


def is_safe_dampened(levels: Sequence[int]) -> bool:
    """Safe as is, or safe once any single level is removed."""
    if is_safe(levels):
        return True
    levels = list(levels)
    return any(is_safe(levels[:skip] + levels[skip + 1 :]) for skip in range(len(levels)))


def count_safe(reports: Iterable[Sequence[int]], dampened: bool = False) -> int:
    """Count the non-empty reports that are safe."""
    check = is_safe_dampened if dampened else is_safe
    return sum(1 for report in reports if report and check(report))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count safe reactor reports.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as handle:
            reports = parse_reports(handle.read())
    except OSError:
        print("Error in opening the file", file=sys.stderr)
        return 1
    print(f"Total Safe : {count_safe(reports)} ")
    print(f"Total Safe (dampened) : {count_safe(reports, dampened=True)} ")
    return 0


if __name__ == "__main__":
    sys.exit(main())