"""
Purpose: Shared Pydantic models for the diversity package.
Description: Immutable records passed between pipeline stages: raw roster rows, normalized executives,
             exploded degree mentions and per-company aggregates.
Key Functions/Classes: `RosterRow`, `ExecutiveRecord`, `DegreeRecord`, `CompanyAggregate`.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import OUTPUT_COLUMNS


class RosterRow(BaseModel):
    """One raw roster line; every column is free text."""
    model_config = ConfigDict(frozen=True)

    company: str = ""
    board_or_executive: str = ""
    position: str = ""
    approximate_categorization: str = ""
    special_area: str = ""
    name: str = ""
    nationality: str = ""
    year_of_birth: str = ""
    educational_background: str = ""
    gender: str = ""
    remarks: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        # csv.DictReader yields None for cells missing from short rows
        return "" if value is None else value


class ExecutiveRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str
    role_type: str
    name: str
    gender: str
    raw_education: str
    position: str = ""
    nationality: str = ""
    year_of_birth: str = ""


class DegreeRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str
    name: str
    degree_category: str


class CompanyAggregate(BaseModel):
    """Education diversity metrics for one company. Aliases are the output column names."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    company: str = Field(alias="Company")
    num_executives: int = Field(alias="Number of Executives", ge=0)
    unique_categories: int = Field(alias="Unique Education Categories", ge=1)
    most_common_field: str = Field(alias="Most Common Education Field")
    most_common_share: Decimal = Field(alias="Share of Most Common Field", ge=0, le=1)
    diversity_score: Decimal = Field(alias="Diversity Score", ge=0, le=1)

    total_degrees: int = Field(ge=1)
    category_counts: Dict[str, int]

    def to_output_row(self) -> Dict[str, str]:
        """Flatten to the output table columns, as strings in column order."""
        dumped = self.model_dump(by_alias=True)
        return {col: str(dumped[col]) for col in OUTPUT_COLUMNS}
