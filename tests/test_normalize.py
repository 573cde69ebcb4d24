"""
Purpose: Unit tests for role/gender/education normalization and executive filtering.
Description: Exact-match mapping tables, default buckets, and the missing-education sentinel.
Key Tests: test_normalize_role, test_normalize_gender, test_filter_executives.
"""

from __future__ import annotations

from edudiversity.config import DiversityConfig
from edudiversity.normalize import (
    filter_executives,
    normalize_education,
    normalize_gender,
    normalize_role,
    normalize_row,
)


def test_normalize_role():
    assert normalize_role("Board of Directors") == "Board"
    assert normalize_role("Executive Management") == "Executive"
    assert normalize_role("Advisory Council") == "Advisory Council"
    # exact match only: no trimming, no case folding
    assert normalize_role(" Executive Management") == " Executive Management"
    assert normalize_role("executive management") == "executive management"
    assert normalize_role(None) == ""


def test_normalize_gender():
    assert normalize_gender(" Male ") == "Male"
    assert normalize_gender("Female") == "Female"
    assert normalize_gender("female") == "Other/Unknown"
    assert normalize_gender("") == "Other/Unknown"
    assert normalize_gender(None) == "Other/Unknown"
    assert normalize_gender("Non-binary") == "Other/Unknown"


def test_normalize_education():
    assert normalize_education("  Law ") == "Law"
    assert normalize_education("   ") == "N/A"
    assert normalize_education(None) == "N/A"
    assert normalize_education("N/A") == "N/A"


def test_normalize_row_keeps_passthrough_fields(make_row):
    rec = normalize_row(make_row("Acme", "Executive Management", "Anna", " Business ", gender=" Female"))
    assert rec.role_type == "Executive"
    assert rec.gender == "Female"
    assert rec.raw_education == "Business"
    assert rec.company == "Acme"


def test_filter_executives(sample_rows, make_row):
    rows = sample_rows + [
        make_row("Acme", "Executive", "Fay", "Law"),  # already normalized label passes through
        make_row("Acme", "executive management", "Gus", "Law"),
    ]
    names = [e.name for e in filter_executives(rows)]
    assert names == ["Anna", "Bo", "Cy", "Eve", "Zoe", "Ben", "Fay"]


def test_filter_executives_custom_mapping(make_row):
    cfg = DiversityConfig(role_mapping={"Ledningsgrupp": "Executive"})
    rows = [
        make_row("Acme", "Ledningsgrupp", "Anna", "Business"),
        make_row("Acme", "Executive Management", "Bo", "Law"),
    ]
    assert [e.name for e in filter_executives(rows, cfg)] == ["Anna"]
