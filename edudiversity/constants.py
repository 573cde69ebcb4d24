"""
Purpose: Constants for the education diversity package.
Description: Centralizes column names and fixed labels to avoid magic strings across the codebase.
Key Constants: INPUT_COLUMNS, OUTPUT_COLUMNS, MISSING_EDUCATION, DEFAULT_OUTPUT_FILENAME.
"""

from __future__ import annotations

from typing import List


# AIDEV-NOTE: Fixed roster header shape; order matches the source spreadsheet export.
INPUT_COLUMNS: List[str] = [
    "company",
    "board_or_executive",
    "position",
    "approximate_categorization",
    "special_area",
    "name",
    "nationality",
    "year_of_birth",
    "educational_background",
    "gender",
    "remarks",
]

OUTPUT_COLUMNS: List[str] = [
    "Company",
    "Number of Executives",
    "Unique Education Categories",
    "Most Common Education Field",
    "Share of Most Common Field",
    "Diversity Score",
]

MISSING_EDUCATION: str = "N/A"
EXECUTIVE_LABEL: str = "Executive"
UNKNOWN_GENDER: str = "Other/Unknown"

DEFAULT_OUTPUT_FILENAME: str = "education_diversity_by_company.csv"
