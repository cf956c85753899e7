# aocsolver

This package solves the first three days of the Advent of Code 2024 puzzles. Each day is its own module. You can call it from Python or run it as a command on your puzzle input.

## Installation

```
pip install .
```

To also install what the test suite needs:

```
pip install .[test]
```

## Command line

Each command reads one puzzle input file. If you give no path, it reads `input.txt` in the current directory.

```
aoc-day1 [input.txt]
aoc-day2 [input.txt]
aoc-day3 [input.txt]
```

You can also run the modules directly, for example `python -m aocsolver.day1 input.txt`.

- `aoc-day1` prints the total distance between the two sorted location lists. It then prints the similarity score.
- `aoc-day2` prints how many reports are safe. It gives the count without the Problem Dampener first and then with it.
- `aoc-day3` prints the sum of every valid `mul(a,b)` instruction. It gives the sum over all of them first. It then gives the sum over only those that `do()` / `don't()` leave enabled.

If a command cannot open the input file, it prints `Error in opening the file` to standard error and exits with status 1.

## Library use

### `aocsolver.day1`

- `parse_pairs(text)` returns the left and right columns as two lists. Lines that do not start with two integers are ignored.
- `total_distance(left, right)` sorts both lists and sums the absolute differences of the paired values. It raises `ValueError` if the lists differ in length.
- `similarity_score(left, right)` sums each left value multiplied by the number of times that value occurs in the right list.

### `aocsolver.day2`

- `parse_reports(text)` returns one list of levels per line. Reading a line stops at its first field that does not start with a number. Lines that yield no numbers are left out.
- `is_safe(levels)` is true when the levels all increase, or all decrease, in steps of 1 to 3. A report with fewer than two levels counts as safe.
- `is_safe_dampened(levels)` is true when the report is safe as it is, or becomes safe once a single level is removed.
- `count_safe(reports, dampened=False)` counts the non-empty reports that are safe.

### `aocsolver.day3`

- `sum_multiplications(text, conditional=False)` sums the products of every valid `mul(a,b)`. When `conditional` is true, `don't()` switches multiplications off and `do()` switches them back on. Multiplications start switched on.

```python
from aocsolver.day1 import parse_pairs, total_distance, similarity_score
from aocsolver.day2 import parse_reports, count_safe
from aocsolver.day3 import sum_multiplications

left, right = parse_pairs("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
total_distance(left, right)      # 11
similarity_score(left, right)    # 31

reports = parse_reports("7 6 4 2 1\n1 2 7 8 9\n")
count_safe(reports)                  # 1
count_safe(reports, dampened=True)   # 1

sum_multiplications("mul(2,4)don't()mul(5,5)do()mul(3,3)")                    # 42
sum_multiplications("mul(2,4)don't()mul(5,5)do()mul(3,3)", conditional=True)  # 17
```

## Running the tests

```
pytest
```