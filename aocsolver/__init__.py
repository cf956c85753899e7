"""Solvers for days 1 to 3 of the Advent of Code 2024 puzzles."""

__version__ = "0.1.0"
__all__ = ["day1", "day2", "day3"]