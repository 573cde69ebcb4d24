"""
Purpose: Python API for the education diversity pipeline.
Description: Wires the stages together: read roster CSV -> normalize and keep executives ->
             explode degrees -> aggregate per company -> write the output table (and optionally a
             Markdown report). Every stage is a pure function over in-memory records.
Key Functions/Classes: `PipelineResult`, `process_roster`, `compute_diversity`, `run_pipeline`.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .config import DiversityConfig, load_config
from .degrees import explode_degrees
from .diversity import aggregate_by_company
from .diversity_logging import get_logger, log_event, log_stage, log_summary
from .errors import EmptyInputWarning
from .io_csv import read_roster_csv, write_diversity_csv
from .models import CompanyAggregate, DegreeRecord, ExecutiveRecord, RosterRow
from .normalize import filter_executives
from .report import education_patterns, summarize_roster, write_markdown_report


@dataclass
class PipelineResult:
    rows: List[RosterRow]
    executives: List[ExecutiveRecord]
    degrees: List[DegreeRecord]
    aggregates: List[CompanyAggregate]
    summary: Dict[str, int] = field(default_factory=dict)
    output_path: Optional[str] = None
    report_path: Optional[str] = None


def process_roster(
    rows: Sequence[RosterRow],
    cfg: Optional[DiversityConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> PipelineResult:
    """Run the in-memory stages over already loaded roster rows."""
    cfg = cfg or load_config()
    logger = logger or get_logger()
    rows = list(rows)

    executives = filter_executives(rows, cfg)
    log_stage(logger, "normalize", rows_in=len(rows), rows_out=len(executives))
    if not executives:
        # Non-fatal: the output table is written with its header only
        warnings.warn("No executive rows after filtering; output will be empty", EmptyInputWarning, stacklevel=2)
        log_event(logger, "empty_input", details={"roster_rows": len(rows)}, level=logging.WARNING)

    degrees = explode_degrees(executives, cfg)
    log_stage(logger, "split_degrees", rows_in=len(executives), rows_out=len(degrees))

    aggregates = aggregate_by_company(degrees, cfg, executives=executives)
    log_stage(logger, "aggregate", rows_in=len(degrees), rows_out=len(aggregates))

    return PipelineResult(
        rows=rows,
        executives=executives,
        degrees=degrees,
        aggregates=aggregates,
        summary=summarize_roster(rows, executives),
    )


def compute_diversity(rows: Sequence[RosterRow], cfg: Optional[DiversityConfig] = None) -> List[CompanyAggregate]:
    """In-memory rows -> aggregates, sorted by company. Stage counts still go to the package logger."""
    return process_roster(rows, cfg).aggregates


def run_pipeline(
    input_csv: str | Path,
    output_csv: str | Path,
    cfg: Optional[DiversityConfig] = None,
    logger: Optional[logging.Logger] = None,
    report_md: Optional[str | Path] = None,
) -> PipelineResult:
    """Read the roster, compute per-company diversity and write the output CSV.

    Raises InputFormatError before anything is written when the roster is unusable.
    """
    cfg = cfg or load_config()
    logger = logger or get_logger()
    log_event(logger, "run_started", details={"input_csv": str(input_csv), "output_csv": str(output_csv)})

    rows = read_roster_csv(input_csv)
    log_stage(logger, "read", rows_in=len(rows), rows_out=len(rows))

    result = process_roster(rows, cfg, logger)

    written = write_diversity_csv(output_csv, result.aggregates)
    result.output_path = str(output_csv)
    log_event(logger, "output_written", details={"path": result.output_path, "rows": written})

    if report_md:
        patterns = education_patterns(result.executives, cfg.pattern_limit, cfg.missing_education)
        result.report_path = write_markdown_report(report_md, result.summary, result.aggregates, patterns, cfg)
        log_event(logger, "report_written", details={"path": result.report_path})

    log_summary(
        logger,
        roster_rows=len(result.rows),
        executives=len(result.executives),
        degrees=len(result.degrees),
        companies=len(result.aggregates),
        output_path=result.output_path,
    )
    return result
