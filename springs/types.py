"""springs.types
=================

Foundational types shared by every module of the package: the tri-state
``Cell`` and the immutable ``Row`` record. The module stays definitions-only so
that importing it never triggers runtime side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class Cell(IntEnum):
    """State of a single spring.

    The integer values double as the cell codes stored in the numpy arrays the
    resolver builds, hence ``IntEnum`` rather than a plain ``Enum``.
    """

    OPERATIONAL = 0
    DAMAGED = 1
    UNKNOWN = 2


Cells = Tuple[Cell, ...]
Groups = Tuple[int, ...]


@dataclass(frozen=True)
class Row:
    """One condition record.

    Parameters
    ----------
    cells:
        The spring states, left to right.
    groups:
        Required lengths of the contiguous damaged runs, in order.

    Notes
    -----
    No consistency check is made between the two halves. A row whose groups
    can never fit its cells is still a valid record; it simply resolves to
    zero arrangements.
    """

    cells: Cells
    groups: Groups


__all__ = ["Cell", "Cells", "Groups", "Row"]
