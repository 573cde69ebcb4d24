"""
Purpose: Shared fixtures for the diversity pipeline tests.
Description: Builds roster rows and writes small roster CSV files with the fixed header.
Key Fixtures: make_row, roster_csv, sample_rows.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Callable, Iterable, List, Sequence

import pytest

from edudiversity.constants import INPUT_COLUMNS
from edudiversity.models import RosterRow


def _row(company: str, role: str, name: str, education: str | None, gender: str = "Male") -> RosterRow:
    return RosterRow(
        company=company,
        board_or_executive=role,
        position="",
        name=name,
        educational_background=education,
        gender=gender,
    )


# (company, role, name, education)
SAMPLE = [
    ("Acme", "Executive Management", "Anna", "Business"),
    ("Acme", "Executive Management", "Bo", "Business, Law"),
    ("Acme", "Executive Management", "Cy", "Engineering"),
    ("Acme", "Board of Directors", "Dee", "Law"),
    ("Acme", "Executive Management", "Eve", ""),
    ("Zed", "Executive Management", "Zoe", "N/A"),
    ("Beta", "Executive Management", "Ben", "Economics, Economics"),
]


@pytest.fixture
def make_row() -> Callable[..., RosterRow]:
    return _row


@pytest.fixture
def sample_rows() -> List[RosterRow]:
    return [_row(*rec) for rec in SAMPLE]


def write_roster(path: Path, records: Iterable[Sequence[str]], header: Sequence[str] = INPUT_COLUMNS) -> Path:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for company, role, name, education in records:
            row = {col: "" for col in header}
            row.update({
                "company": company,
                "board_or_executive": role,
                "name": name,
                "educational_background": education,
                "gender": "Female",
            })
            writer.writerow([row[col] for col in header])
    return path


@pytest.fixture
def roster_csv(tmp_path: Path) -> Path:
    return write_roster(tmp_path / "roster.csv", SAMPLE)
