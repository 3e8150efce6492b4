from __future__ import annotations

from itertools import groupby
from typing import List, Sequence

from .constants import UNFOLD_FACTOR
from .types import Cell, Row


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------
def unfold(row: Row, count: int = UNFOLD_FACTOR) -> Row:
    """Return ``row`` repeated ``count`` times.

    Parameters
    ----------
    row:
        Base record. It is never modified.
    count:
        Number of copies. The copies of the cells are joined by a single
        unknown cell; the groups are simply concatenated.

    Returns
    -------
    Row
        Fresh record. ``count == 1`` yields a row equal to ``row``.
    """

    if count < 1:
        raise ValueError(f"unfold count must be positive, got {count}")
    cells: List[Cell] = []
    for copy in range(count):
        if copy:
            cells.append(Cell.UNKNOWN)
        cells.extend(row.cells)
    return Row(cells=tuple(cells), groups=row.groups * count)


# ---------------------------------------------------------------------------
# Inspection helpers
# ---------------------------------------------------------------------------
def damaged_runs(cells: Sequence[Cell]) -> List[int]:
    """Lengths of the maximal damaged runs in ``cells``, left to right."""

    return [len(list(run)) for cell, run in groupby(cells) if cell == Cell.DAMAGED]


def minimum_length(groups: Sequence[int]) -> int:
    """Shortest row able to host ``groups`` with single-cell gaps."""

    if not groups:
        return 0
    return sum(groups) + len(groups) - 1


__all__ = ["unfold", "damaged_runs", "minimum_length"]
