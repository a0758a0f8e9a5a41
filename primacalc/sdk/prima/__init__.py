"""prima - Colombian semi-annual service bonus (prima) calculation.

Scope:
- Input validation of employee records (validation.py)
- Semester window resolution from the clock's year (period.py)
- Worked days net of unpaid absences (worked_days.py)
- Base salary by current or average method (base_salary.py)
- Gross bonus, exempt income and Art. 383 withholding (withholding.py)
- Pipeline orchestration (calculator.py)

Constraints:
- Pure calculation - no storage or transport
- Receives one employee record, returns one CalculationResult
- Fiscal parameters come from a FiscalYearRules object, loaded from
  tax_rules/{year}.yaml or the built-in 2025 defaults

Usage:
    from primacalc.sdk.prima import calculate, get_fiscal_rules

    result = calculate(employee_data)
    result = calculate(employee_data, rules=get_fiscal_rules("2025"),
                       clock=lambda: date(2025, 8, 1))
"""

from .errors import (
    PrimaServiceError,
    MissingDataError,
    InvalidDataError,
    RulesNotFoundError,
)

from .schemas import (
    CalculationResult,
    FiscalYearRules,
    WithholdingBracket,
    SPANISH_LABELS,
)

from .rules import (
    DEFAULT_RULES,
    DEFAULT_FISCAL_YEAR,
    load_fiscal_rules,
    get_fiscal_rules,
    get_available_years,
)

from .validation import EmployeeRecord, validate_record, normalize_keys, parse_date
from .period import resolve_semester, semester_months, is_first_half
from .worked_days import calculate_worked_days
from .base_salary import resolve_base_salary
from .withholding import (
    calculate_gross_bonus,
    calculate_exempt_income,
    calculate_withholding_tax,
    find_bracket,
    round_to_unit,
)
from .calculator import calculate

__all__ = [
    # Errors
    "PrimaServiceError",
    "MissingDataError",
    "InvalidDataError",
    "RulesNotFoundError",
    # Schemas
    "CalculationResult",
    "FiscalYearRules",
    "WithholdingBracket",
    "SPANISH_LABELS",
    # Rules
    "DEFAULT_RULES",
    "DEFAULT_FISCAL_YEAR",
    "load_fiscal_rules",
    "get_fiscal_rules",
    "get_available_years",
    # Stages
    "EmployeeRecord",
    "validate_record",
    "normalize_keys",
    "parse_date",
    "resolve_semester",
    "semester_months",
    "is_first_half",
    "calculate_worked_days",
    "resolve_base_salary",
    "calculate_gross_bonus",
    "calculate_exempt_income",
    "calculate_withholding_tax",
    "find_bracket",
    "round_to_unit",
    # Pipeline
    "calculate",
]
