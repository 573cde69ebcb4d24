"""
Purpose: CSV reader for roster input and writer for the diversity table.
Description: Validates the fixed roster header before any row is used, and flattens company
             aggregates into a stable set of columns written atomically.
Key Functions/Classes: read_roster_csv, write_diversity_csv, open_atomic.
"""

from __future__ import annotations

import csv
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO

from .constants import INPUT_COLUMNS, OUTPUT_COLUMNS
from .errors import InputFormatError
from .models import CompanyAggregate, RosterRow


def read_roster_csv(path: str | Path) -> List[RosterRow]:
    """Read every roster row from a UTF-8 CSV with the fixed header.

    Raises InputFormatError when the header is absent, a known column is missing,
    or the bytes are not valid UTF-8. Extra columns are ignored.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"CSV not found: {p}")

    rows: List[RosterRow] = []
    try:
        # utf-8-sig accepts spreadsheet exports that start with a BOM
        with p.open("r", newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            fieldnames = [name.strip() for name in (reader.fieldnames or [])]
            if not fieldnames:
                raise InputFormatError(f"CSV has no header row: {p}")
            missing = [col for col in INPUT_COLUMNS if col not in fieldnames]
            if missing:
                raise InputFormatError(
                    f"CSV is missing expected column(s): {', '.join(missing)}",
                    missing_columns=missing,
                )
            reader.fieldnames = fieldnames
            for raw in reader:
                rows.append(RosterRow(**{col: raw.get(col) for col in INPUT_COLUMNS}))
    except UnicodeDecodeError as e:
        raise InputFormatError(f"CSV is not valid UTF-8: {p} ({e.reason} at byte {e.start})") from e
    except csv.Error as e:
        raise InputFormatError(f"CSV could not be parsed: {p} ({e})") from e
    return rows


@contextmanager
def open_atomic(path: str | Path) -> Iterator[TextIO]:
    """Write to `<path>.tmp` and replace the target only after a clean close."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = Path(f"{target}.tmp")
    f = tmp.open("w", newline="", encoding="utf-8")
    try:
        yield f
    except BaseException:
        f.close()
        tmp.unlink(missing_ok=True)
        raise
    else:
        f.flush()
        os.fsync(f.fileno())
        f.close()
        os.replace(tmp, target)


def write_diversity_csv(path: str | Path, aggregates: Iterable[CompanyAggregate]) -> int:
    """Write the output table sorted by company; returns the number of data rows."""
    ordered = sorted(aggregates, key=lambda a: a.company)
    with open_atomic(path) as f:
        writer = csv.writer(f)
        writer.writerow(OUTPUT_COLUMNS)
        for agg in ordered:
            row = agg.to_output_row()
            writer.writerow([row[col] for col in OUTPUT_COLUMNS])
    return len(ordered)
