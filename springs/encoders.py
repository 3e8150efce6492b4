"""springs.encoders
====================

Textual encoding helpers for condition records. A record line looks like
``"???.### 1,1,3"``: the spring pattern, a single space, then the
comma-separated damaged group lengths. Parsing is strict; anything that does
not follow the format raises :class:`RecordFormatError` so callers can abort
before producing partial output.
"""

from __future__ import annotations

from typing import Dict, List

from .constants import DAMAGED_SYMBOL, OPERATIONAL_SYMBOL, UNKNOWN_SYMBOL
from .types import Cell, Row

SYMBOL_TO_CELL: Dict[str, Cell] = {
    OPERATIONAL_SYMBOL: Cell.OPERATIONAL,
    DAMAGED_SYMBOL: Cell.DAMAGED,
    UNKNOWN_SYMBOL: Cell.UNKNOWN,
}
CELL_TO_SYMBOL: Dict[Cell, str] = {cell: symbol for symbol, cell in SYMBOL_TO_CELL.items()}


class RecordFormatError(ValueError):
    """Raised when a line does not follow the ``<pattern> <groups>`` format."""


class RowEncoder:
    """Converts rows to and from their one-line text form.

    The encoder is stateless; a single module-level instance is shared by the
    helper functions below.
    """

    separator = " "
    group_separator = ","

    def to_text(self, row: Row) -> str:
        pattern = "".join(CELL_TO_SYMBOL[cell] for cell in row.cells)
        groups = self.group_separator.join(str(group) for group in row.groups)
        return f"{pattern}{self.separator}{groups}"

    def to_row(self, text: str) -> Row:
        line = text.strip()
        pattern, sep, groups_text = line.partition(self.separator)
        if not sep:
            raise RecordFormatError(f"Missing separator between pattern and groups in {line!r}")

        cells = []
        for symbol in pattern:
            try:
                cells.append(SYMBOL_TO_CELL[symbol])
            except KeyError as exc:
                raise RecordFormatError(f"Unknown symbol {symbol!r} in {line!r}") from exc

        groups = []
        for token in groups_text.split(self.group_separator):
            if not (token.isascii() and token.isdigit()) or int(token) == 0:
                raise RecordFormatError(f"Invalid group length {token!r} in {line!r}")
            groups.append(int(token))
        return Row(cells=tuple(cells), groups=tuple(groups))


DEFAULT_ENCODER = RowEncoder()


def parse_row(text: str) -> Row:
    """Parse a single record line with :data:`DEFAULT_ENCODER`."""

    return DEFAULT_ENCODER.to_row(text)


def parse_rows(text: str) -> List[Row]:
    """Parse every non-blank line of ``text`` into a :class:`Row`."""

    return [parse_row(line) for line in text.splitlines() if line.strip()]


def row_to_text(row: Row) -> str:
    return DEFAULT_ENCODER.to_text(row)


__all__ = [
    "RecordFormatError",
    "RowEncoder",
    "DEFAULT_ENCODER",
    "SYMBOL_TO_CELL",
    "CELL_TO_SYMBOL",
    "parse_row",
    "parse_rows",
    "row_to_text",
]
