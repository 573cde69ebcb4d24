"""
Purpose: Summary statistics and a human-readable Markdown report for a diversity run.
Description: Roster overview counts, the most frequent raw education strings, score statistics and
             the most/least diverse companies, rendered as Markdown for quick review.
Key Functions: summarize_roster, education_patterns, score_statistics, diversity_distribution,
               most_diverse, least_diverse, render_markdown_report, write_markdown_report

AIDEV-NOTE: Keep formatting stable for downstream diffing and human review.
"""

from __future__ import annotations

from collections import Counter
from decimal import Decimal
from fractions import Fraction
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import DiversityConfig
from .diversity import round_half_up
from .io_csv import open_atomic
from .models import CompanyAggregate, ExecutiveRecord, RosterRow


def summarize_roster(rows: Sequence[RosterRow], executives: Sequence[ExecutiveRecord]) -> Dict[str, int]:
    return {
        "total_records": len(rows),
        "total_companies": len({r.company for r in rows}),
        "total_people": len({r.name for r in rows}),
        "executive_records": len(executives),
    }


def education_patterns(
    executives: Sequence[ExecutiveRecord],
    limit: int = 20,
    missing: str = "N/A",
) -> List[Tuple[str, int]]:
    """Most frequent raw education strings among executives, excluding the missing sentinel."""
    counts = Counter(e.raw_education for e in executives if e.raw_education != missing)
    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return ordered[: max(0, limit)]


def score_statistics(aggregates: Sequence[CompanyAggregate], places: int = 3) -> Dict[str, Optional[Decimal]]:
    """Min/avg/max and sample standard deviation of diversity scores.

    Every value is None for an empty table; stddev is None below two companies.
    """
    stats: Dict[str, Optional[Decimal]] = {"min": None, "avg": None, "max": None, "stddev": None}
    scores = [Fraction(a.diversity_score) for a in aggregates]
    if not scores:
        return stats
    n = len(scores)
    mean = sum(scores) / n
    stats["min"] = round_half_up(min(scores), places)
    stats["avg"] = round_half_up(mean, places)
    stats["max"] = round_half_up(max(scores), places)
    if n > 1:
        variance = sum((s - mean) ** 2 for s in scores) / (n - 1)
        std = (Decimal(variance.numerator) / Decimal(variance.denominator)).sqrt()
        stats["stddev"] = round_half_up(Fraction(std), places)
    return stats


def diversity_distribution(
    aggregates: Sequence[CompanyAggregate],
    high: Decimal = Decimal("0.7"),
    low: Decimal = Decimal("0.3"),
) -> Dict[str, int]:
    """Total executives across scored companies and how many companies score above `high` or below `low`."""
    return {
        "total_executives": sum(a.num_executives for a in aggregates),
        "high_diversity": sum(1 for a in aggregates if a.diversity_score > high),
        "low_diversity": sum(1 for a in aggregates if a.diversity_score < low),
    }


def most_diverse(aggregates: Sequence[CompanyAggregate], n: int = 5) -> List[CompanyAggregate]:
    return sorted(aggregates, key=lambda a: (-a.diversity_score, a.company))[: max(0, n)]


def least_diverse(aggregates: Sequence[CompanyAggregate], n: int = 5) -> List[CompanyAggregate]:
    return sorted(aggregates, key=lambda a: (a.diversity_score, a.company))[: max(0, n)]


def _fmt(value: Any) -> str:
    return "n/a" if value is None else str(value)


def _overview_section(summary: Dict[str, int], companies_scored: int) -> List[str]:
    lines: List[str] = ["### Overview", ""]
    lines.append("| Metric | Value |")
    lines.append("| --- | ---: |")
    lines.append(f"| Total records | {summary.get('total_records', 0)} |")
    lines.append(f"| Total companies | {summary.get('total_companies', 0)} |")
    lines.append(f"| Total people | {summary.get('total_people', 0)} |")
    lines.append(f"| Executive records | {summary.get('executive_records', 0)} |")
    lines.append(f"| Companies scored | {companies_scored} |")
    lines.append("")
    return lines


def _statistics_section(stats: Dict[str, Optional[Decimal]]) -> List[str]:
    lines: List[str] = ["### Diversity Score Statistics", ""]
    lines.append("| Min | Avg | Max | Stddev |")
    lines.append("| ---: | ---: | ---: | ---: |")
    lines.append(f"| {_fmt(stats['min'])} | {_fmt(stats['avg'])} | {_fmt(stats['max'])} | {_fmt(stats['stddev'])} |")
    lines.append("")
    return lines


def _distribution_section(distribution: Dict[str, int], high: Decimal, low: Decimal) -> List[str]:
    lines: List[str] = ["### Diversity Distribution", ""]
    lines.append("| Metric | Value |")
    lines.append("| --- | ---: |")
    lines.append(f"| Total executives | {distribution['total_executives']} |")
    lines.append(f"| Companies with high diversity (>{high}) | {distribution['high_diversity']} |")
    lines.append(f"| Companies with low diversity (<{low}) | {distribution['low_diversity']} |")
    lines.append("")
    return lines


def _company_table(title: str, aggregates: Sequence[CompanyAggregate]) -> List[str]:
    lines: List[str] = [f"### {title}", ""]
    if not aggregates:
        lines.extend(["_No companies scored._", ""])
        return lines
    lines.append("| Company | Executives | Unique Categories | Most Common Field | Diversity Score |")
    lines.append("| --- | ---: | ---: | --- | ---: |")
    for a in aggregates:
        lines.append(
            f"| {a.company} | {a.num_executives} | {a.unique_categories} | {a.most_common_field} | {a.diversity_score} |"
        )
    lines.append("")
    return lines


def _patterns_section(patterns: Sequence[Tuple[str, int]]) -> List[str]:
    lines: List[str] = ["### Education Patterns", ""]
    if not patterns:
        lines.extend(["_No executive education recorded._", ""])
        return lines
    lines.append("| Education | Frequency |")
    lines.append("| --- | ---: |")
    for text, count in patterns:
        lines.append(f"| {text} | {count} |")
    lines.append("")
    return lines


def render_markdown_report(
    summary: Dict[str, int],
    aggregates: Sequence[CompanyAggregate],
    patterns: Sequence[Tuple[str, int]],
    cfg: Optional[DiversityConfig] = None,
) -> str:
    cfg = cfg or DiversityConfig()
    lines: List[str] = ["## Executive Education Diversity", ""]
    lines.extend(_overview_section(summary, len(aggregates)))
    lines.extend(_statistics_section(score_statistics(aggregates, cfg.rounding_places)))
    distribution = diversity_distribution(aggregates, cfg.high_threshold, cfg.low_threshold)
    lines.extend(_distribution_section(distribution, cfg.high_threshold, cfg.low_threshold))
    lines.extend(_company_table(f"Top {cfg.top_n} Most Diverse Companies", most_diverse(aggregates, cfg.top_n)))
    lines.extend(_company_table(f"Top {cfg.top_n} Least Diverse Companies", least_diverse(aggregates, cfg.top_n)))
    lines.extend(_patterns_section(patterns))
    return "\n".join(lines).rstrip() + "\n"


def write_markdown_report(
    path: str | Path,
    summary: Dict[str, int],
    aggregates: Sequence[CompanyAggregate],
    patterns: Sequence[Tuple[str, int]],
    cfg: Optional[DiversityConfig] = None,
) -> str:
    """Render the report and write it atomically; returns the written path."""
    content = render_markdown_report(summary, aggregates, patterns, cfg)
    with open_atomic(path) as f:
        f.write(content)
    return str(path)
