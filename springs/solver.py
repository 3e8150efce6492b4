"""springs.solver
==================

High-level orchestration: run the resolver over every row of an input, once
on the rows as given and once on their unfolded form, and total the results.
Functions in this module are the primary public API used by the CLI.
"""

from __future__ import annotations

import multiprocessing
import sys
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from time import perf_counter
from typing import List, Optional, Sequence

from .constants import UNFOLD_FACTOR, UNSATISFIABLE_LOG
from .logging_utils import log_unsatisfiable
from .resolver import arrangements
from .row_utils import minimum_length, unfold
from .types import Row


# -----------------------------------------------------------------------------
# Configs / results
# -----------------------------------------------------------------------------
@dataclass
class SolveConfig:
    """Configuration knobs for a solving run."""

    unfold_factor: int = UNFOLD_FACTOR
    max_workers: int = 1
    log_unsatisfiable: bool = False
    fail_log: str = UNSATISFIABLE_LOG
    verbose: bool = True

    def __post_init__(self) -> None:
        if self.unfold_factor < 1:
            raise ValueError(f"unfold_factor must be positive, got {self.unfold_factor}")
        if self.max_workers <= 0:
            self.max_workers = multiprocessing.cpu_count()


@dataclass
class RowResult:
    index: int
    count: int
    elapsed: float
    cells: int
    groups: int


@dataclass
class SolveReport:
    """Per-row results of both passes plus their totals."""

    base: List[RowResult] = field(default_factory=list)
    unfolded: List[RowResult] = field(default_factory=list)

    @property
    def base_total(self) -> int:
        return sum(result.count for result in self.base)

    @property
    def unfolded_total(self) -> int:
        return sum(result.count for result in self.unfolded)


# -----------------------------------------------------------------------------
# Solving
# -----------------------------------------------------------------------------
def solve_row(index: int, row: Row) -> RowResult:
    """Worker function; also executed in subprocesses."""

    start = perf_counter()
    count = arrangements(row)
    return RowResult(
        index=index,
        count=count,
        elapsed=perf_counter() - start,
        cells=len(row.cells),
        groups=len(row.groups),
    )


def solve_pass(rows: Sequence[Row], cfg: Optional[SolveConfig] = None) -> List[RowResult]:
    """Resolve every row and return the results in row order.

    With more than one worker the rows are spread over a process pool. Rows
    are independent, so completion order does not matter; the results are put
    back into row order before returning.
    """

    cfg = cfg or SolveConfig()
    if cfg.max_workers == 1 or len(rows) <= 1:
        return [solve_row(index, row) for index, row in enumerate(rows)]

    results: List[Optional[RowResult]] = [None] * len(rows)
    with ProcessPoolExecutor(max_workers=cfg.max_workers) as executor:
        futures = {executor.submit(solve_row, index, row): index for index, row in enumerate(rows)}
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    return [result for result in results if result is not None]


def _record_unsatisfiable(label: str, rows: Sequence[Row], results: Sequence[RowResult], cfg: SolveConfig) -> None:
    for result in results:
        if result.count:
            continue
        row = rows[result.index]
        if cfg.verbose and minimum_length(row.groups) > len(row.cells):
            print(f"[warn] {label} row {result.index} is too short for its groups", file=sys.stderr)
        if cfg.log_unsatisfiable:
            log_unsatisfiable(label, result.index, row, path=cfg.fail_log)


def solve_rows(rows: Sequence[Row], cfg: Optional[SolveConfig] = None) -> SolveReport:
    """Solve the base pass, then the unfolded pass.

    Parameters
    ----------
    rows:
        Parsed records.
    cfg:
        Run configuration; defaults to :class:`SolveConfig`.

    Returns
    -------
    SolveReport
        Row results for both passes. Rows with zero arrangements are reported
        like any other row and, when enabled, appended to the failure log.
    """

    cfg = cfg or SolveConfig()
    unfolded_rows = [unfold(row, cfg.unfold_factor) for row in rows]

    base = solve_pass(rows, cfg)
    _record_unsatisfiable("base", rows, base, cfg)
    unfolded = solve_pass(unfolded_rows, cfg)
    _record_unsatisfiable("unfolded", unfolded_rows, unfolded, cfg)
    return SolveReport(base=base, unfolded=unfolded)


__all__ = ["SolveConfig", "RowResult", "SolveReport", "solve_row", "solve_pass", "solve_rows"]
