"""springs.cli
===============

Command-line entry point: read condition records, print one diagnostic line
per row and pass, then the base and unfolded totals.
"""

from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path
from typing import List

from .constants import UNFOLD_FACTOR, UNSATISFIABLE_LOG
from .encoders import RecordFormatError, parse_rows
from .solver import SolveConfig, SolveReport, solve_rows


def write_stats(path: Path, report: SolveReport) -> None:
    """Write one CSV line per solved row of both passes."""

    with path.open("w", newline="") as csv_file:
        writer = csv.writer(csv_file)
        writer.writerow(["pass", "index", "cells", "groups", "arrangements", "elapsed"])
        for label, results in (("base", report.base), ("unfolded", report.unfolded)):
            for result in results:
                writer.writerow([label, result.index, result.cells, result.groups, result.count, f"{result.elapsed:.6f}"])


def main(argv: List[str] | None = None) -> None:
    """Parse CLI arguments and count arrangements."""

    parser = argparse.ArgumentParser("springs", description="Count spring condition record arrangements")
    parser.add_argument("infile", nargs="?", default="-", help="Condition records, one per line ('-' for stdin)")
    parser.add_argument("--unfold", type=int, default=UNFOLD_FACTOR, help="Copies per row in the unfolded pass")
    parser.add_argument("--max-workers", type=int, default=1, help="Number of worker processes (0 = all CPUs)")
    parser.add_argument("--log-unsatisfiable", action="store_true", help="Append zero-arrangement rows to a JSONL log")
    parser.add_argument("--fail-log", default=UNSATISFIABLE_LOG, help="Path of the unsatisfiable-row log")
    parser.add_argument("--stats-csv", default=None, help="Write per-row timings to this CSV file")
    parser.add_argument("--quiet", action="store_true", help="Only print the two totals")
    args = parser.parse_args(argv)

    if args.unfold < 1:
        parser.error("--unfold must be at least 1")
    text = sys.stdin.read() if args.infile == "-" else Path(args.infile).read_text()
    try:
        rows = parse_rows(text)
    except RecordFormatError as exc:
        parser.error(str(exc))

    cfg = SolveConfig(
        unfold_factor=args.unfold,
        max_workers=args.max_workers,
        log_unsatisfiable=args.log_unsatisfiable,
        fail_log=args.fail_log,
        verbose=not args.quiet,
    )
    report = solve_rows(rows, cfg)
    if not args.quiet:
        for results in (report.base, report.unfolded):
            for result in results:
                print(f"{result.index} {result.count}")
    print(f"{report.base_total} {report.unfolded_total}")
    if args.stats_csv:
        write_stats(Path(args.stats_csv), report)


__all__ = ["main", "write_stats"]
