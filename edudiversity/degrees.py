"""
Purpose: Explode free-text education lists into one record per degree mention.
Description: Splits on the delimiter with no cap on the number of tokens, trims each token and
             drops empties. Duplicate tokens are kept; each mention counts.
Key Functions: split_education, explode_degrees.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .config import DiversityConfig
from .constants import MISSING_EDUCATION
from .models import DegreeRecord, ExecutiveRecord


def split_education(raw: Optional[str], delimiter: str = ",", missing: str = MISSING_EDUCATION) -> List[str]:
    """Return the ordered degree categories in `raw`.

    - Missing/empty values and the missing sentinel yield []
    - Tokens are whitespace-trimmed; empty tokens are dropped
    - No vocabulary check: any non-empty token is a category
    """
    if raw is None:
        return []
    text = raw.strip()
    if not text or text == missing:
        return []
    return [token.strip() for token in text.split(delimiter) if token.strip()]


def explode_degrees(executives: Iterable[ExecutiveRecord], cfg: Optional[DiversityConfig] = None) -> List[DegreeRecord]:
    cfg = cfg or DiversityConfig()
    records: List[DegreeRecord] = []
    for exe in executives:
        for category in split_education(exe.raw_education, cfg.delimiter, cfg.missing_education):
            records.append(DegreeRecord(company=exe.company, name=exe.name, degree_category=category))
    return records
