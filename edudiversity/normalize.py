"""
Purpose: Normalize raw roster rows and keep the executive subset.
Description: Role type and gender are mapped through explicit lookup tables with a documented
             default; empty education becomes the missing sentinel. Every function is total:
             unexpected values fall into a default bucket instead of raising.
Key Functions: normalize_role, normalize_gender, normalize_education, normalize_row, filter_executives.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .config import DiversityConfig
from .models import ExecutiveRecord, RosterRow


# AIDEV-NOTE: Matching is exact on purpose; "executive management" (lowercase) is not an executive.

_DEFAULT_CONFIG = DiversityConfig()


def normalize_role(value: Optional[str], cfg: DiversityConfig = _DEFAULT_CONFIG) -> str:
    """Map known role labels; anything else passes through unchanged (no trimming)."""
    if value is None:
        return ""
    return cfg.role_mapping.get(value, value)


def normalize_gender(value: Optional[str], cfg: DiversityConfig = _DEFAULT_CONFIG) -> str:
    text = (value or "").strip()
    return cfg.gender_mapping.get(text, cfg.gender_default)


def normalize_education(value: Optional[str], cfg: DiversityConfig = _DEFAULT_CONFIG) -> str:
    text = (value or "").strip()
    return text or cfg.missing_education


def normalize_row(row: RosterRow, cfg: DiversityConfig = _DEFAULT_CONFIG) -> ExecutiveRecord:
    return ExecutiveRecord(
        company=row.company,
        role_type=normalize_role(row.board_or_executive, cfg),
        name=row.name,
        gender=normalize_gender(row.gender, cfg),
        raw_education=normalize_education(row.educational_background, cfg),
        position=row.position,
        nationality=row.nationality,
        year_of_birth=row.year_of_birth,
    )


def filter_executives(rows: Iterable[RosterRow], cfg: DiversityConfig = _DEFAULT_CONFIG) -> List[ExecutiveRecord]:
    """Normalize every row and keep those whose role is exactly the executive label."""
    normalized = (normalize_row(r, cfg) for r in rows)
    return [rec for rec in normalized if rec.role_type == cfg.executive_label]
