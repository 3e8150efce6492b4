"""Public package interface for springs."""

from .cli import main
from .encoders import RecordFormatError, parse_row, parse_rows
from .resolver import arrangements
from .row_utils import unfold
from .scatter import Scatter
from .solver import SolveConfig, solve_rows
from .types import Cell, Row

__all__ = [
    "main",
    "arrangements",
    "unfold",
    "parse_row",
    "parse_rows",
    "RecordFormatError",
    "Scatter",
    "SolveConfig",
    "solve_rows",
    "Cell",
    "Row",
]
