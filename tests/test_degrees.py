"""
Purpose: Unit tests for splitting education strings into degree records.
Description: Unbounded comma splitting, trimming, empty-token dropping and duplicate counting.
Key Tests: test_split_basic, test_split_five_tokens, test_explode_degrees.
"""

from __future__ import annotations

from edudiversity.degrees import explode_degrees, split_education
from edudiversity.models import ExecutiveRecord


def _exe(name: str, education: str, company: str = "Acme") -> ExecutiveRecord:
    return ExecutiveRecord(company=company, role_type="Executive", name=name, gender="Male", raw_education=education)


def test_split_basic():
    assert split_education("Business, Law") == ["Business", "Law"]
    assert split_education("  Engineering  ") == ["Engineering"]


def test_split_missing_values():
    assert split_education("N/A") == []
    assert split_education("") == []
    assert split_education(None) == []


def test_split_drops_empty_tokens():
    assert split_education("Law,, ,Art,") == ["Law", "Art"]


def test_split_five_tokens():
    tokens = split_education("Business, Law, Engineering, Economics, Medicine")
    assert tokens == ["Business", "Law", "Engineering", "Economics", "Medicine"]


def test_split_keeps_duplicates():
    assert split_education("Law, Law") == ["Law", "Law"]


def test_split_custom_delimiter():
    assert split_education("Law; Art", delimiter=";") == ["Law", "Art"]


def test_explode_degrees():
    records = explode_degrees([
        _exe("Anna", "Business"),
        _exe("Bo", "Business, Law"),
        _exe("Zoe", "N/A", company="Zed"),
        _exe("Max", "A, B, C, D, E", company="Big"),
    ])
    assert [(r.company, r.name, r.degree_category) for r in records[:3]] == [
        ("Acme", "Anna", "Business"),
        ("Acme", "Bo", "Business"),
        ("Acme", "Bo", "Law"),
    ]
    assert all(r.company != "Zed" for r in records)
    assert len([r for r in records if r.name == "Max"]) == 5
