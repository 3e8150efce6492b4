from __future__ import annotations

import itertools
import math
import random
import sys
from pathlib import Path
from typing import List

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from springs.encoders import RecordFormatError, parse_row, parse_rows, row_to_text
from springs.resolver import Resolver, arrangements
from springs.row_utils import damaged_runs, minimum_length, unfold
from springs.scatter import Scatter
from springs.solver import SolveConfig, solve_pass, solve_rows
from springs.types import Cell, Row

SAMPLE = """\
???.### 1,1,3
.??..??...?##. 1,1,3
?#?#?#?#?#?#?#? 1,3,1,6
????.#...#... 4,1,1
????.######..#####. 1,6,5
?###???????? 3,2,1
"""


def brute_force(row: Row) -> int:
    unknown = [index for index, cell in enumerate(row.cells) if cell == Cell.UNKNOWN]
    total = 0
    for choice in itertools.product((Cell.OPERATIONAL, Cell.DAMAGED), repeat=len(unknown)):
        cells = list(row.cells)
        for index, cell in zip(unknown, choice):
            cells[index] = cell
        if damaged_runs(cells) == list(row.groups):
            total += 1
    return total


def random_rows(seed: int, count: int) -> List[Row]:
    rng = random.Random(seed)
    rows = []
    for _ in range(count):
        length = rng.randint(1, 11)
        cells = tuple(rng.choice(list(Cell)) for _ in range(length))
        groups = tuple(rng.randint(1, 4) for _ in range(rng.randint(1, 4)))
        rows.append(Row(cells=cells, groups=groups))
    return rows


def test_sample_base_counts():
    rows = parse_rows(SAMPLE)
    assert [arrangements(row) for row in rows] == [1, 4, 1, 1, 4, 10]


def test_sample_unfolded_counts():
    rows = parse_rows(SAMPLE)
    assert [arrangements(unfold(row)) for row in rows] == [1, 16384, 1, 16, 2500, 506250]


def test_solve_rows_totals():
    report = solve_rows(parse_rows(SAMPLE), SolveConfig(verbose=False))
    assert report.base_total == 21
    assert report.unfolded_total == 525152
    assert [result.index for result in report.unfolded] == list(range(6))


@pytest.mark.parametrize(
    "line, expected",
    [
        ("#.#.### 1,1,3", 1),
        (".#...#....###. 1,1,3", 1),
        ("#.#.### 1,2,3", 0),
        ("### 3", 1),
        ("### 2", 0),
        ("##.## 4", 0),
        ("....# 1", 1),
    ],
)
def test_known_rows_match_exactly(line, expected):
    row = parse_row(line)
    assert Cell.UNKNOWN not in row.cells
    assert arrangements(row) == expected
    assert (damaged_runs(row.cells) == list(row.groups)) == bool(expected)


def test_no_groups_left():
    assert arrangements(Row(cells=(Cell.OPERATIONAL, Cell.UNKNOWN), groups=())) == 1
    assert arrangements(Row(cells=(Cell.OPERATIONAL, Cell.DAMAGED), groups=())) == 0


def test_row_too_short_is_zero():
    assert arrangements(parse_row("??? 2,2")) == 0
    assert minimum_length((2, 2)) == 5


def test_matches_brute_force_on_small_rows():
    for row in random_rows(seed=12, count=300):
        assert arrangements(row) == brute_force(row), row_to_text(row)


def test_matches_brute_force_on_small_unfolds():
    for line in ("?#? 1", "??.# 1,1", "#? 2", "?.? 1"):
        row = unfold(parse_row(line), 2)
        assert arrangements(row) == brute_force(row), line


def test_operational_to_unknown_never_decreases():
    for row in random_rows(seed=7, count=60):
        base = arrangements(row)
        for index, cell in enumerate(row.cells):
            if cell != Cell.OPERATIONAL:
                continue
            cells = list(row.cells)
            cells[index] = Cell.UNKNOWN
            assert arrangements(Row(cells=tuple(cells), groups=row.groups)) >= base


def test_unfold_shape():
    row = parse_row("#.? 1,1")
    folded = unfold(row, 3)
    assert row_to_text(folded) == "#.??#.??#.? 1,1,1,1,1,1"
    assert unfold(row, 1) == row
    assert row_to_text(row) == "#.? 1,1"


def test_unfold_rejects_non_positive():
    with pytest.raises(ValueError):
        unfold(parse_row("# 1"), 0)


def test_scatter_base_cases():
    scatter = Scatter()
    for m in range(1, 8):
        assert scatter.count(0, m) == 1
    for n in range(0, 12):
        assert scatter.count(n, 1) == 1


def test_scatter_binomial():
    scatter = Scatter()
    for n in range(0, 9):
        for m in range(1, 7):
            assert scatter.count(n, m) == math.comb(n + m - 1, m - 1)


def test_scatter_cache_reuse():
    scatter = Scatter()
    first = scatter.count(6, 4)
    cached = len(scatter.cache)
    assert cached > 0
    assert scatter.count(6, 4) == first
    assert len(scatter.cache) == cached
    with pytest.raises(ValueError):
        scatter.count(3, 0)


def test_resolver_uses_given_scatter():
    scatter = Scatter()
    resolver = Resolver(unfold(parse_row("?###???????? 3,2,1")), scatter)
    assert resolver.count() == 506250
    assert len(scatter.cache) > 0


@pytest.mark.parametrize(
    "line",
    ["???.###", "??x 1", "??? 1,,2", "??? 1,a", "??? -1", "??? ", "??? ¹", "??? ٣", "??? 0", "??? 1,0"],
)
def test_parse_errors(line):
    with pytest.raises(RecordFormatError):
        parse_row(line)


def test_parse_rows_skips_blank_lines():
    rows = parse_rows("\n# 1\n\n.? 1\n")
    assert [row_to_text(row) for row in rows] == ["# 1", ".? 1"]
    assert rows[1].cells == (Cell.OPERATIONAL, Cell.UNKNOWN)
    assert rows[1].groups == (1,)


def test_parallel_pass_matches_sequential():
    rows = [unfold(row) for row in parse_rows(SAMPLE)]
    sequential = solve_pass(rows, SolveConfig(max_workers=1))
    parallel = solve_pass(rows, SolveConfig(max_workers=2))
    assert [r.count for r in parallel] == [r.count for r in sequential]
    assert [r.index for r in parallel] == list(range(len(rows)))


def test_zero_length_group_has_no_arrangements():
    for groups in ((0,), (1, 0)):
        row = Row(cells=(Cell.UNKNOWN,) * 3, groups=groups)
        assert arrangements(row) == brute_force(row) == 0
