"""springs.resolver
====================

Arrangement counting for a single condition record.

The resolver walks the row left to right, but instead of branching on every
unknown cell it looks at whole homogeneous runs. A run of unknown cells is
either skipped entirely (treated as operational) or used to host one or more
of the upcoming groups, with the last hosted group allowed to spill past the
run's right edge. The number of ways to lay out the leftover slack inside the
run is delegated to :class:`~springs.scatter.Scatter`, which is what keeps
unfolded rows of a hundred cells tractable.

Positions are indices into arrays built once per row, so no recursive call
copies a slice of the row.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from .scatter import Scatter
from .types import Cell, Row

State = Tuple[int, int, bool]


def _prefix_counts(codes: np.ndarray, cell: Cell) -> List[int]:
    """``out[i]`` is the number of ``cell`` entries in ``codes[:i]``."""

    return np.concatenate(([0], np.cumsum(codes == int(cell)))).astype(int).tolist()


def _run_lengths(codes: np.ndarray) -> List[int]:
    """``out[i]`` is how far the run of ``codes[i]`` extends from ``i``."""

    size = len(codes)
    changes = np.flatnonzero(np.diff(codes)) + 1
    starts = np.concatenate(([0], changes))
    ends = np.concatenate((changes, [size]))
    return (np.repeat(ends, ends - starts) - np.arange(size)).astype(int).tolist()


class Resolver:
    """Counts the arrangements of one row.

    Parameters
    ----------
    row:
        Record to resolve.
    scatter:
        Slack distribution counter shared by every branch of this row. A fresh
        one is created when omitted.
    """

    def __init__(self, row: Row, scatter: Scatter | None = None) -> None:
        self.row = row
        self.groups = row.groups
        self.scatter = scatter if scatter is not None else Scatter()
        codes = np.fromiter((int(cell) for cell in row.cells), dtype=np.int8, count=len(row.cells))
        self.size = len(codes)
        self.cells: List[int] = codes.astype(int).tolist()
        self.runs = _run_lengths(codes)
        self.operational = _prefix_counts(codes, Cell.OPERATIONAL)
        self.damaged = _prefix_counts(codes, Cell.DAMAGED)
        self.memo: Dict[State, int] = {}

    def _has_operational(self, start: int, stop: int) -> bool:
        return stop > start and self.operational[stop] - self.operational[start] > 0

    def _has_damaged(self, start: int, stop: int) -> bool:
        return stop > start and self.damaged[stop] - self.damaged[start] > 0

    def count(self) -> int:
        return self.descend(0, 0, False)

    def descend(self, pos: int, group: int, restrict: bool) -> int:
        """Arrangements of ``cells[pos:]`` against ``groups[group:]``.

        ``restrict`` is set when the cell before ``pos`` closed a damaged
        group, so a damaged run may not start exactly at ``pos``.
        """

        key = (pos, group, restrict)
        cached = self.memo.get(key)
        if cached is not None:
            return cached
        result = self._descend(pos, group, restrict)
        self.memo[key] = result
        return result

    def _descend(self, pos: int, group: int, restrict: bool) -> int:
        groups = self.groups
        if group == len(groups):
            return 0 if self._has_damaged(pos, self.size) else 1
        remaining = self.size - pos
        need = groups[group]
        if need < 1 or need > remaining:
            return 0
        size = self.runs[pos]
        cell = self.cells[pos]

        if cell == Cell.OPERATIONAL:
            return self.descend(pos + size, group, False)

        if cell == Cell.DAMAGED:
            if restrict or size > need or self._has_operational(pos + size, pos + need):
                return 0
            return self.descend(pos + need, group + 1, True)

        # Unknown run: leave it empty, or pack the next ``fit`` groups into it.
        total = self.descend(pos + size, group, False)
        available = size - int(restrict)
        for fit in range(1, len(groups) - group + 1):
            last = groups[group + fit - 1]
            # The fit-th group ends ``tail`` cells into the run's right edge
            # and may spill over into the cells that follow.
            for tail in range(1, last + 1):
                if tail > available:
                    break
                end = size + last - tail
                if end > remaining:
                    continue
                if not self._has_operational(pos + size, pos + end):
                    after = self.descend(pos + end, group + fit, True)
                    total += after * self.scatter.count(available - tail, fit)
            # All ``fit`` groups sit strictly inside the run.
            if last + 1 > available:
                break
            available -= last + 1
            after = self.descend(pos + size, group + fit, False)
            if after:
                total += after * sum(self.scatter.count(gaps, fit) for gaps in range(available + 1))
        return total


def arrangements(row: Row) -> int:
    """Number of ways to resolve the unknown cells of ``row``.

    Each call owns its own :class:`Scatter` and state memo; nothing is shared
    between rows.
    """

    return Resolver(row).count()


__all__ = ["Resolver", "arrangements"]
