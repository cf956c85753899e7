import pytest

from aocsolver.day2 import count_safe, is_safe, is_safe_dampened, main, parse_reports

EXAMPLE = [
    [7, 6, 4, 2, 1],
    [1, 2, 7, 8, 9],
    [9, 7, 6, 2, 1],
    [1, 3, 2, 4, 5],
    [8, 6, 4, 4, 1],
    [1, 3, 6, 7, 9],
]
SAFE = [EXAMPLE[0], EXAMPLE[5]]
UNSAFE = [EXAMPLE[1], EXAMPLE[2], EXAMPLE[3], EXAMPLE[4]]
FIXED_BY_DAMPENER = [EXAMPLE[3], EXAMPLE[4]]


def test_parse_reports():
    text = "1 2 3\n\n4  5 x 6\n12abc 7\nfoo\n"
    assert parse_reports(text) == [[1, 2, 3], [4, 5], [12, 7]]


def test_parse_reports_round_trip():
    text = "\n".join(" ".join(str(v) for v in report) for report in EXAMPLE)
    assert parse_reports(text) == EXAMPLE


@pytest.mark.parametrize("report", SAFE)
def test_safe_reports(report):
    assert is_safe(report)
    assert is_safe(list(reversed(report)))


@pytest.mark.parametrize("report", UNSAFE)
def test_unsafe_reports(report):
    assert not is_safe(report)


@pytest.mark.parametrize("report", FIXED_BY_DAMPENER)
def test_dampener_fixes(report):
    assert not is_safe(report)
    assert is_safe_dampened(report)


@pytest.mark.parametrize("report", [EXAMPLE[1], EXAMPLE[2]])
def test_dampener_cannot_fix(report):
    assert not is_safe_dampened(report)


def test_short_reports_are_safe():
    assert is_safe([42])
    assert is_safe([])


def test_safe_implies_dampened_safe():
    for report in EXAMPLE:
        if is_safe(report):
            assert is_safe_dampened(report)


def test_count_safe_example():
    assert count_safe(EXAMPLE) == 2
    assert count_safe(EXAMPLE, dampened=True) == 4


def test_count_safe_ignores_empty_reports():
    assert count_safe([[], *EXAMPLE]) == count_safe(EXAMPLE)


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(" ".join(map(str, r)) for r in EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert f"Total Safe : {count_safe(EXAMPLE)} " in out
    assert f"Total Safe (dampened) : {count_safe(EXAMPLE, dampened=True)} " in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.txt")]) == 1