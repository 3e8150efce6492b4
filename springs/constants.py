"""springs.constants
====================

Global constants used across the counter. Keeping them here avoids import
cycles between modules and makes it easier to discover configurable paths.
"""

from __future__ import annotations

UNFOLD_FACTOR = 5
UNSATISFIABLE_LOG = "unsatisfiable_rows.jsonl"

OPERATIONAL_SYMBOL = "."
DAMAGED_SYMBOL = "#"
UNKNOWN_SYMBOL = "?"

__all__ = [
    "UNFOLD_FACTOR",
    "UNSATISFIABLE_LOG",
    "OPERATIONAL_SYMBOL",
    "DAMAGED_SYMBOL",
    "UNKNOWN_SYMBOL",
]
