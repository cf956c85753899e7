[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolver"
version = "0.1.0"
description = "Solvers for the first three Advent of Code 2024 puzzles: list distances, report safety and corrupted multiplication instructions"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-day1 = "aocsolver.day1:main"
aoc-day2 = "aocsolver.day2:main"
aoc-day3 = "aocsolver.day3:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
