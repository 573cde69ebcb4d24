"""
Purpose: Exception and warning types for the diversity pipeline.
Description: Structural input problems abort the run; an empty executive subset only warns.
Key Functions/Classes: DiversityError, InputFormatError, ConfigError, EmptyInputWarning.
"""

from __future__ import annotations

from typing import Iterable, Optional


class DiversityError(Exception):
    """Base exception for the diversity pipeline."""

    pass


class InputFormatError(DiversityError, ValueError):
    """Roster input is structurally unusable (header, columns, encoding)."""

    def __init__(self, message: str, missing_columns: Optional[Iterable[str]] = None):
        self.missing_columns = list(missing_columns or [])
        super().__init__(message)


class ConfigError(DiversityError):
    """Normalization/aggregation config file is missing or malformed."""

    pass


class EmptyInputWarning(UserWarning):
    """No executive rows survived filtering; the output table will be empty."""

    pass
