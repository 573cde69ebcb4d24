"""
Purpose: Tests for summary statistics and the Markdown report.
Description: Score statistics with half-up rounding, rankings, education patterns and rendering.
Key Tests: test_score_statistics, test_rankings, test_education_patterns, test_render_markdown_report.
"""

from __future__ import annotations

from decimal import Decimal

from edudiversity.models import CompanyAggregate, ExecutiveRecord
from edudiversity.report import (
    diversity_distribution,
    education_patterns,
    least_diverse,
    most_diverse,
    render_markdown_report,
    score_statistics,
    write_markdown_report,
)


def _agg(company: str, score: str) -> CompanyAggregate:
    return CompanyAggregate(
        company=company,
        num_executives=1,
        unique_categories=1 if Decimal(score) == 0 else 2,
        most_common_field="Law",
        most_common_share=Decimal("0.500"),
        diversity_score=Decimal(score),
        total_degrees=2,
        category_counts={"Law": 2},
    )


def _exe(education: str) -> ExecutiveRecord:
    return ExecutiveRecord(company="Acme", role_type="Executive", name="x", gender="Male", raw_education=education)


def test_score_statistics():
    stats = score_statistics([_agg("Acme", "0.625"), _agg("Beta", "0.000")])
    assert stats["min"] == Decimal("0.000")
    assert stats["avg"] == Decimal("0.313")
    assert stats["max"] == Decimal("0.625")
    assert stats["stddev"] == Decimal("0.442")


def test_score_statistics_small_tables():
    assert score_statistics([]) == {"min": None, "avg": None, "max": None, "stddev": None}
    single = score_statistics([_agg("Acme", "0.500")])
    assert single["avg"] == Decimal("0.500")
    assert single["stddev"] is None


def test_rankings():
    aggs = [_agg("Beta", "0.500"), _agg("Acme", "0.500"), _agg("Gamma", "0.750"), _agg("Delta", "0.000")]
    assert [a.company for a in most_diverse(aggs, 3)] == ["Gamma", "Acme", "Beta"]
    assert [a.company for a in least_diverse(aggs, 2)] == ["Delta", "Acme"]


def test_education_patterns():
    exes = [_exe("Law"), _exe("Business, Law"), _exe("Law"), _exe("N/A"), _exe("Art")]
    assert education_patterns(exes) == [("Law", 2), ("Art", 1), ("Business, Law", 1)]
    assert education_patterns(exes, limit=1) == [("Law", 2)]


def test_render_markdown_report():
    summary = {"total_records": 3, "total_companies": 2, "total_people": 3, "executive_records": 2}
    text = render_markdown_report(summary, [_agg("Acme", "0.625")], [("Law", 2)])
    assert text.startswith("## Executive Education Diversity")
    assert "| Companies scored | 1 |" in text
    assert "### Top 5 Most Diverse Companies" in text
    assert "| Law | 2 |" in text
    assert "| 0.625 | 0.625 | 0.625 | n/a |" in text


def test_render_markdown_report_empty():
    text = render_markdown_report({}, [], [])
    assert "_No companies scored._" in text
    assert "_No executive education recorded._" in text


def test_write_markdown_report(tmp_path):
    path = tmp_path / "reports" / "report.md"
    written = write_markdown_report(path, {}, [_agg("Acme", "0.625")], [])
    assert written == str(path)
    assert "Acme" in path.read_text(encoding="utf-8")


def test_diversity_distribution():
    aggs = [_agg("Acme", "0.750"), _agg("Beta", "0.700"), _agg("Gamma", "0.300"), _agg("Delta", "0.000")]
    # thresholds are strict: 0.700 is not high, 0.300 is not low
    assert diversity_distribution(aggs) == {"total_executives": 4, "high_diversity": 1, "low_diversity": 1}
    assert diversity_distribution(aggs, high=Decimal("0.5"), low=Decimal("0.5")) == {
        "total_executives": 4,
        "high_diversity": 2,
        "low_diversity": 2,
    }
    assert diversity_distribution([]) == {"total_executives": 0, "high_diversity": 0, "low_diversity": 0}


def test_render_markdown_report_distribution():
    text = render_markdown_report({}, [_agg("Acme", "0.750"), _agg("Beta", "0.000")], [])
    assert "### Diversity Distribution" in text
    assert "| Total executives | 2 |" in text
    assert "| Companies with high diversity (>0.7) | 1 |" in text
    assert "| Companies with low diversity (<0.3) | 1 |" in text
