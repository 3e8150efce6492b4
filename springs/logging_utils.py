"""springs.logging_utils
=========================

Simple logging utilities, mainly for recording rows that resolved to zero
arrangements so they can be audited later.
"""

from __future__ import annotations

import json
from pathlib import Path

from .constants import UNSATISFIABLE_LOG
from .encoders import row_to_text
from .types import Row


def log_unsatisfiable(label: str, index: int, row: Row, path: str = UNSATISFIABLE_LOG) -> None:
    """Append a JSON line describing ``row`` to ``path``."""

    entry = {
        "pass": label,
        "index": index,
        "row": row_to_text(row),
        "cells": len(row.cells),
        "groups": list(row.groups),
    }
    with Path(path).open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["log_unsatisfiable"]
