"""
Purpose: Centralized configuration helpers for the diversity package.
Description: Loads environment variables and the YAML normalization tables, and exposes them
             as a small immutable `DiversityConfig`.
Key Functions/Classes: `DiversityConfig`, `load_config`, `get_diversity_config`, `validate_diversity_config`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .constants import DEFAULT_OUTPUT_FILENAME, EXECUTIVE_LABEL, MISSING_EDUCATION, UNKNOWN_GENDER
from .errors import ConfigError


# AIDEV-NOTE: Load env from .env if present to ease local dev.
load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).parent / "diversity_config.yaml"

REQUIRED_SECTIONS = ("roles", "gender", "education", "rounding", "aggregation")

# Raw YAML cache keyed by resolved path
_config_cache: Dict[str, Dict[str, Any]] = {}


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_config_path() -> Path:
    return Path(os.getenv("EDUDIV_CONFIG_PATH") or DEFAULT_CONFIG_PATH)


def get_default_input_path() -> Optional[str]:
    return os.getenv("EDUDIV_INPUT_CSV")


def get_default_output_path(input_csv: Optional[str | Path] = None) -> str:
    """Output CSV path: EDUDIV_OUTPUT_CSV, else next to the input file."""
    env_path = os.getenv("EDUDIV_OUTPUT_CSV")
    if env_path:
        return env_path
    if input_csv:
        return str(Path(input_csv).parent / DEFAULT_OUTPUT_FILENAME)
    return DEFAULT_OUTPUT_FILENAME


def get_log_path() -> Optional[str]:
    return os.getenv("EDUDIV_LOG_PATH")


def get_diversity_config(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Load and cache the raw YAML configuration."""
    config_path = Path(path) if path else get_config_path()
    key = str(config_path.resolve())

    if key not in _config_cache:
        if not config_path.exists():
            raise ConfigError(f"Diversity configuration not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not validate_diversity_config(raw):
            raise ConfigError(f"Diversity configuration is missing required sections: {config_path}")
        _config_cache[key] = raw

    return _config_cache[key]


def validate_diversity_config(raw: Dict[str, Any]) -> bool:
    """
    Check that the configuration has every required section and usable values.

    Returns:
        True if configuration is valid, False otherwise
    """
    if not isinstance(raw, dict):
        return False
    for section in REQUIRED_SECTIONS:
        if not isinstance(raw.get(section), dict):
            return False
    if not isinstance(raw["roles"].get("mapping", {}), dict):
        return False
    if not isinstance(raw["gender"].get("mapping", {}), dict):
        return False
    if not raw["education"].get("delimiter"):
        return False
    places = raw["rounding"].get("places", 3)
    if not isinstance(places, int) or places < 0:
        return False
    return True


@dataclass(frozen=True)
class DiversityConfig:
    role_mapping: Dict[str, str] = field(default_factory=lambda: {
        "Board of Directors": "Board",
        "Executive Management": "Executive",
    })
    executive_label: str = EXECUTIVE_LABEL
    gender_mapping: Dict[str, str] = field(default_factory=lambda: {"Male": "Male", "Female": "Female"})
    gender_default: str = UNKNOWN_GENDER
    delimiter: str = ","
    missing_education: str = MISSING_EDUCATION
    rounding_places: int = 3
    count_all_executives: bool = False
    top_n: int = 5
    pattern_limit: int = 20
    high_threshold: Decimal = Decimal("0.7")
    low_threshold: Decimal = Decimal("0.3")


def load_config(path: Optional[str | Path] = None, **overrides: Any) -> DiversityConfig:
    """Build a `DiversityConfig` from YAML, then environment, then keyword overrides."""
    raw = get_diversity_config(path)
    roles = raw["roles"]
    gender = raw["gender"]
    education = raw["education"]
    report = raw.get("report") or {}

    values: Dict[str, Any] = {
        "role_mapping": {str(k): str(v) for k, v in (roles.get("mapping") or {}).items()},
        "executive_label": str(roles.get("executive_label", "Executive")),
        "gender_mapping": {str(k): str(v) for k, v in (gender.get("mapping") or {}).items()},
        "gender_default": str(gender.get("default", "Other/Unknown")),
        "delimiter": str(education["delimiter"]),
        "missing_education": str(education.get("missing", "N/A")),
        "rounding_places": int(raw["rounding"].get("places", 3)),
        "count_all_executives": bool(raw["aggregation"].get("count_all_executives", False)),
        "top_n": int(report.get("top_n", 5)),
        "pattern_limit": int(report.get("pattern_limit", 20)),
        "high_threshold": Decimal(str(report.get("high_threshold", "0.7"))),
        "low_threshold": Decimal(str(report.get("low_threshold", "0.3"))),
    }

    env_count_all = _env_flag("EDUDIV_COUNT_ALL_EXECUTIVES")
    if env_count_all is not None:
        values["count_all_executives"] = env_count_all

    values.update({k: v for k, v in overrides.items() if v is not None})
    return DiversityConfig(**values)
