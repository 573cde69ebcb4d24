"""
Purpose: Executive education diversity scoring.
Description: Computes a per-company diversity score (1 - sum(p_i^2) over degree mentions) from a
flat executive/board roster CSV.
Key Functions/Classes: `run_pipeline`, `compute_diversity`, `CompanyAggregate`.
"""

from .api import PipelineResult, compute_diversity, process_roster, run_pipeline
from .errors import ConfigError, DiversityError, EmptyInputWarning, InputFormatError
from .models import CompanyAggregate, DegreeRecord, ExecutiveRecord, RosterRow

__all__ = [
    "run_pipeline",
    "compute_diversity",
    "process_roster",
    "PipelineResult",
    "CompanyAggregate",
    "DegreeRecord",
    "ExecutiveRecord",
    "RosterRow",
    "DiversityError",
    "InputFormatError",
    "ConfigError",
    "EmptyInputWarning",
]
