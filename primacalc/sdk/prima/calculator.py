"""Prima calculation pipeline.

Runs validation, semester resolution, worked days, base salary and the
bonus/tax steps in sequence for one employee record.
"""

import logging
from datetime import date
from typing import Any, Mapping, Optional

from .base_salary import resolve_base_salary
from .period import Clock, resolve_semester
from .rules import DEFAULT_RULES
from .schemas import CalculationResult, FiscalYearRules
from .validation import validate_record
from .withholding import (
    calculate_exempt_income,
    calculate_gross_bonus,
    calculate_withholding_tax,
)
from .worked_days import calculate_worked_days

logger = logging.getLogger(__name__)


def calculate(
    employee_data: Mapping[str, Any],
    rules: Optional[FiscalYearRules] = None,
    clock: Clock = date.today,
) -> CalculationResult:
    """Calculate the prima for one employee, net of withholding tax.

    Args:
        employee_data: Raw employee record (English or Spanish keys)
        rules: Fiscal year rules (default: built-in 2025 rules)
        clock: Zero-argument callable returning today's date; its year
            selects the semester

    Returns:
        CalculationResult with amounts rounded for presentation

    Raises:
        MissingDataError: Required key or needed month salary absent
        InvalidDataError: Malformed dates or salaries
    """
    record = validate_record(employee_data)
    rules = rules or DEFAULT_RULES

    semester_start, semester_end = resolve_semester(record.calculation_period, clock)

    worked_days = calculate_worked_days(
        record.entry_date, record.unpaid_absences, semester_start, semester_end
    )

    base_salary = resolve_base_salary(
        record.monthly_salaries, record.salary_method, record.calculation_period
    )

    gross_bonus = calculate_gross_bonus(base_salary, worked_days)
    exempt_income = calculate_exempt_income(gross_bonus, rules)
    taxable_base = gross_bonus - exempt_income
    withholding_tax = calculate_withholding_tax(taxable_base, rules)

    logger.debug(
        f"{record.name}: {semester_start} to {semester_end}, gross {gross_bonus:.2f}, "
        f"taxable {taxable_base:.2f}, withheld {withholding_tax}"
    )

    return CalculationResult(
        employee_name=str(record.name),
        period_label=str(record.calculation_period),
        base_salary=round(base_salary, 2),
        worked_days=worked_days,
        gross_bonus=round(gross_bonus, 2),
        exempt_income=round(exempt_income, 2),
        taxable_base=round(taxable_base, 2),
        withholding_tax=withholding_tax,
        net_bonus=round(gross_bonus - withholding_tax, 2),
    )
