"""Input validation for employee records.

Checks structure and types before any computation runs and returns an
immutable EmployeeRecord. Only the required keys, the entry date and the
salary values are checked; period and method values are passed through.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Tuple

from .errors import InvalidDataError, MissingDataError

# Checked in this order; the first missing key is reported.
REQUIRED_KEYS = (
    "name",
    "entry_date",
    "monthly_salaries",
    "calculation_period",
    "salary_method",
)

# Spanish key spellings accepted as aliases
SOURCE_KEY_ALIASES = {
    "nombre": "name",
    "fecha_ingreso": "entry_date",
    "salarios_mensuales": "monthly_salaries",
    "periodo_calculo": "calculation_period",
    "metodo_calculo_salario": "salary_method",
    "ausencias_no_remuneradas": "unpaid_absences",
}

DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


@dataclass(frozen=True)
class EmployeeRecord:
    """Validated input for a single prima calculation."""

    name: Any
    entry_date: date
    monthly_salaries: Dict[str, float]
    calculation_period: Any
    salary_method: Any
    unpaid_absences: Tuple[Any, ...] = field(default_factory=tuple)


def parse_date(value: Any, field_name: str) -> date:
    """Parse a date value in YYYY-MM-DD (or DD/MM/YYYY) format.

    date objects are returned as is (YAML loaders produce them).

    Raises:
        InvalidDataError: If the value isn't a parseable calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                continue
    raise InvalidDataError(f"Invalid date in '{field_name}': {value!r}")


def is_numeric(value: Any) -> bool:
    """True for finite int, float and Decimal values (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    try:
        return math.isfinite(value)
    except (OverflowError, ValueError):
        return False


def normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Map Spanish source keys to their English names.

    English keys win when both spellings are present.
    """
    normalized = dict(data)
    for source_key, key in SOURCE_KEY_ALIASES.items():
        if source_key in normalized:
            value = normalized.pop(source_key)
            normalized.setdefault(key, value)
    return normalized


def validate_record(data: Mapping[str, Any]) -> EmployeeRecord:
    """Validate raw employee data and build an EmployeeRecord.

    Args:
        data: Raw mapping with English or Spanish keys

    Returns:
        EmployeeRecord with parsed entry date and float salaries

    Raises:
        MissingDataError: If a required key is absent
        InvalidDataError: If entry_date, monthly_salaries or
            unpaid_absences are malformed
    """
    if not isinstance(data, Mapping):
        raise InvalidDataError(f"Employee data must be a mapping, got {type(data).__name__}")

    data = normalize_keys(data)

    for key in REQUIRED_KEYS:
        if key not in data:
            raise MissingDataError(f"Missing key '{key}' in employee data.")

    entry_date = parse_date(data["entry_date"], "entry_date")

    salaries = data["monthly_salaries"]
    if not isinstance(salaries, Mapping):
        raise InvalidDataError("'monthly_salaries' must map month names to amounts.")
    bad_months = [month for month, amount in salaries.items() if not is_numeric(amount)]
    if bad_months:
        raise InvalidDataError(
            f"All monthly salaries must be finite numbers (invalid: {', '.join(map(str, bad_months))})."
        )

    absences = data.get("unpaid_absences") or ()
    if not isinstance(absences, (list, tuple)):
        raise InvalidDataError("'unpaid_absences' must be a list of dates.")

    return EmployeeRecord(
        name=data["name"],
        entry_date=entry_date,
        monthly_salaries={month: float(amount) for month, amount in salaries.items()},
        calculation_period=data["calculation_period"],
        salary_method=data["salary_method"],
        unpaid_absences=tuple(absences),
    )
