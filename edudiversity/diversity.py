"""
Purpose: Per-company education diversity aggregation.
Description: Groups degree mentions by company and computes counts, the most common field and the
             complement of the Simpson index, 1 - sum(p_i^2), over degree instances (not people).
Key Functions: count_categories, most_common_field, simpson_diversity, round_half_up,
               aggregate_company, aggregate_by_company.

AIDEV-NOTE: Proportions are exact Fractions; rounding happens once, at the end, half-up.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .config import DiversityConfig
from .models import CompanyAggregate, DegreeRecord, ExecutiveRecord


def round_half_up(value: Fraction, places: int = 3) -> Decimal:
    """Round an exact value to `places` decimals, halves away from zero."""
    exact = Decimal(value.numerator) / Decimal(value.denominator)
    return exact.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def count_categories(records: Iterable[DegreeRecord]) -> Dict[str, int]:
    return dict(Counter(r.degree_category for r in records))


def most_common_field(counts: Mapping[str, int]) -> Tuple[str, int]:
    """Highest count wins; ties go to the lexicographically smallest category."""
    if not counts:
        raise ValueError("most_common_field requires at least one category")
    return min(counts.items(), key=lambda kv: (-kv[1], kv[0]))


def simpson_diversity(counts: Mapping[str, int]) -> Fraction:
    total = sum(counts.values())
    if total <= 0:
        raise ValueError("simpson_diversity requires a positive total count")
    return 1 - sum(Fraction(c, total) ** 2 for c in counts.values())


def aggregate_company(
    company: str,
    records: List[DegreeRecord],
    *,
    places: int = 3,
    num_executives: Optional[int] = None,
) -> CompanyAggregate:
    """Aggregate one company's degree records.

    num_executives defaults to the distinct non-empty names among `records`.
    """
    counts = count_categories(records)
    total = sum(counts.values())
    field, top = most_common_field(counts)
    if num_executives is None:
        num_executives = len({r.name for r in records if r.name})
    return CompanyAggregate(
        company=company,
        num_executives=num_executives,
        unique_categories=len(counts),
        most_common_field=field,
        most_common_share=round_half_up(Fraction(top, total), places),
        diversity_score=round_half_up(simpson_diversity(counts), places),
        total_degrees=total,
        category_counts=dict(sorted(counts.items())),
    )


def aggregate_by_company(
    degrees: Iterable[DegreeRecord],
    cfg: Optional[DiversityConfig] = None,
    executives: Optional[Iterable[ExecutiveRecord]] = None,
) -> List[CompanyAggregate]:
    """One aggregate per company that has at least one degree record, sorted by company.

    With `cfg.count_all_executives`, the executive count covers every executive of the
    company (from `executives`), not only those who contributed a degree. Companies
    without degrees are still left out.
    """
    cfg = cfg or DiversityConfig()
    grouped: Dict[str, List[DegreeRecord]] = defaultdict(list)
    for rec in degrees:
        grouped[rec.company].append(rec)

    roster: Dict[str, Set[str]] = defaultdict(set)
    if cfg.count_all_executives:
        if executives is None:
            raise ValueError("count_all_executives requires the executive records")
        for exe in executives:
            if exe.name:
                roster[exe.company].add(exe.name)

    aggregates: List[CompanyAggregate] = []
    for company in sorted(grouped):
        headcount = len(roster[company]) if cfg.count_all_executives else None
        aggregates.append(
            aggregate_company(company, grouped[company], places=cfg.rounding_places, num_executives=headcount)
        )
    return aggregates
