"""
Purpose: Provide structured logging helpers for the diversity pipeline.
Description: JSON-style log lines for pipeline events, per-stage row counts, and the end-of-run
            summary. Lines go to stdout and, when a path is given, are appended to a .jsonl file.
Key Functions: get_logger, close_file_handlers, log_event, log_stage, log_summary

AIDEV-NOTE: Centralize logging; prefer structured fields for easy parsing.
"""

from __future__ import annotations
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

# AIDEV-NOTE: Avoid reconfiguring root logger elsewhere; use this factory.


def get_logger(name: str = "edudiversity", path: Optional[str | Path] = None) -> logging.Logger:
    """Return the package logger; with `path`, log lines also go to that file and only that file."""
    logger = logging.getLogger(name)
    formatter = logging.Formatter("%(message)s")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    if path is not None:
        target = Path(path).resolve()
        close_file_handlers(logger, keep=target)
        has_file = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == target
            for h in logger.handlers
        )
        if not has_file:
            target.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(target, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger


def close_file_handlers(logger: logging.Logger, keep: Optional[Path] = None) -> None:
    """Detach and close every file handler except the one writing to `keep`."""
    for h in list(logger.handlers):
        if isinstance(h, logging.FileHandler) and (keep is None or Path(h.baseFilename) != keep):
            logger.removeHandler(h)
            h.close()


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _to_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


def log_event(logger: logging.Logger, event: str, *, details: Optional[Dict[str, Any]] = None,
              level: int = logging.INFO) -> None:
    logger.log(level, _to_json({
        "ts": _iso_now(),
        "type": "event",
        "event": event,
        "details": details or {},
    }))


def log_stage(logger: logging.Logger, stage: str, *, rows_in: int, rows_out: int) -> None:
    logger.info(_to_json({
        "ts": _iso_now(),
        "type": "stage",
        "stage": stage,
        "rows_in": rows_in,
        "rows_out": rows_out,
    }))


def log_summary(logger: logging.Logger, *, roster_rows: int, executives: int, degrees: int,
                companies: int, output_path: Optional[str] = None) -> None:
    logger.info(_to_json({
        "ts": _iso_now(),
        "type": "summary",
        "roster_rows": roster_rows,
        "executives": executives,
        "degrees": degrees,
        "companies": companies,
        "output_path": output_path,
    }))
