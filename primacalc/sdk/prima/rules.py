"""Fiscal-year rules: built-in defaults and YAML loading."""

import logging
from pathlib import Path
from typing import List, Optional

import yaml

from ..config import get_rules_dirs
from .errors import RulesNotFoundError
from .schemas import FiscalYearRules, WithholdingBracket

logger = logging.getLogger(__name__)

DEFAULT_FISCAL_YEAR = 2025

# DIAN Resolución 000193 de 04-12-2024
UVT_VALUE = 49799.0
EXEMPT_RATE = 0.25
EXEMPT_LIMIT_UVT = 790.0
WITHHOLDING_THRESHOLD_UVT = 95.0

# Art. 383 E.T. withholding table for 2025, in declared order.
# Format: (min_uvt, max_uvt, rate, fixed_fee_uvt)
# The first two rows overlap the rest; the first matching row wins.
WITHHOLDING_TABLE_2025 = [
    (360, float('inf'), 0.39, 770),
    (2300, float('inf'), 0.37, 268),
    (945, 2300, 0.35, 162),
    (640, 945, 0.33, 69),
    (150, 360, 0.28, 10),
    (95, 150, 0.19, 0),
    (0, 95, 0.0, 0),
]

DEFAULT_RULES = FiscalYearRules(
    year=DEFAULT_FISCAL_YEAR,
    uvt_value=UVT_VALUE,
    exempt_rate=EXEMPT_RATE,
    exempt_limit_uvt=EXEMPT_LIMIT_UVT,
    withholding_threshold_uvt=WITHHOLDING_THRESHOLD_UVT,
    withholding_table=tuple(
        WithholdingBracket(min_uvt=lo, max_uvt=hi, rate=rate, fixed_fee_uvt=fee)
        for lo, hi, rate, fee in WITHHOLDING_TABLE_2025
    ),
)


def _find_rules_file(year: str) -> Optional[Path]:
    """Return the first YYYY.yaml found across rules directories."""
    for rules_dir in get_rules_dirs():
        candidate = rules_dir / f"{year}.yaml"
        if candidate.exists():
            return candidate
    return None


def get_available_years() -> List[int]:
    """Get sorted list of years with a rules file (descending)."""
    years = set()
    for rules_dir in get_rules_dirs():
        if not rules_dir.is_dir():
            continue
        years.update(int(p.stem) for p in rules_dir.glob("*.yaml") if p.stem.isdigit())
    return sorted(years, reverse=True)


def load_fiscal_rules(year: str) -> FiscalYearRules:
    """Load fiscal rules for a specific year from YYYY.yaml.

    Raises:
        RulesNotFoundError: If no rules directory has a file for the year
        pydantic.ValidationError: If the file doesn't match the schema
    """
    rules_file = _find_rules_file(str(year))
    if rules_file is None:
        raise RulesNotFoundError(f"Fiscal rules file not found for year {year}")

    logger.debug(f"loading fiscal rules from {rules_file}")
    with open(rules_file, "r") as f:
        data = yaml.safe_load(f) or {}

    return FiscalYearRules.model_validate(data)


def get_fiscal_rules(year: str) -> FiscalYearRules:
    """Get fiscal rules for a year with fallback to prior years.

    Uses the requested year's file if present, otherwise the nearest earlier
    year. If no earlier year exists, tries all years in descending order.

    Raises:
        RulesNotFoundError: If no rules file exists at all
    """
    available_years = get_available_years()
    target_year = int(year)

    candidate_years = [y for y in available_years if y <= target_year]
    if not candidate_years:
        candidate_years = available_years

    if not candidate_years:
        raise RulesNotFoundError(f"No fiscal rules files found for year {year}")

    chosen = candidate_years[0]
    if chosen != target_year:
        logger.warning(f"No fiscal rules for {year}, using {chosen}")
    return load_fiscal_rules(str(chosen))
