"""Gross bonus, exempt income and withholding tax (Art. 383 E.T.).

Amounts stay unrounded between steps. Only the withholding tax is rounded
here, to a whole currency unit; everything else is rounded when the result
is assembled.
"""

import logging
from typing import Optional

from .schemas import FiscalYearRules, WithholdingBracket

logger = logging.getLogger(__name__)

# Commercial year used as the prima divisor, regardless of the window length
COMMERCIAL_YEAR_DAYS = 360.0


def round_to_unit(amount: float) -> int:
    """Round to the nearest whole currency unit (0.5 rounds away from zero)."""
    return int(amount + 0.5) if amount >= 0 else int(amount - 0.5)


def calculate_gross_bonus(base_salary: float, worked_days: int) -> float:
    """Prima before taxes: base_salary * worked_days / 360."""
    return (base_salary * worked_days) / COMMERCIAL_YEAR_DAYS


def calculate_exempt_income(gross_bonus: float, rules: FiscalYearRules) -> float:
    """Exempt share of the bonus, capped at the annual UVT limit."""
    return min(gross_bonus * rules.exempt_rate, rules.exempt_limit)


def find_bracket(base_uvt: float, rules: FiscalYearRules) -> Optional[WithholdingBracket]:
    """First table row containing base_uvt, searched in declared order."""
    for bracket in rules.withholding_table:
        if bracket.contains(base_uvt):
            return bracket
    return None


def calculate_withholding_tax(taxable_base: float, rules: FiscalYearRules) -> int:
    """Withholding tax on the taxable base, in whole currency units.

    Returns 0 when the base is not positive, when it is at or below the
    withholding threshold, or when no table row matches.
    """
    if taxable_base <= 0:
        return 0

    base_uvt = taxable_base / rules.uvt_value

    if base_uvt <= rules.withholding_threshold_uvt:
        return 0

    bracket = find_bracket(base_uvt, rules)
    if bracket is None:
        logger.debug(f"no withholding bracket for {base_uvt:.2f} UVT")
        return 0

    tax_uvt = (base_uvt - bracket.min_uvt) * bracket.rate + bracket.fixed_fee_uvt
    logger.debug(
        f"withholding: {base_uvt:.2f} UVT in bracket >{bracket.min_uvt:g} "
        f"at {bracket.rate:.0%} + {bracket.fixed_fee_uvt:g} UVT = {tax_uvt:.4f} UVT"
    )
    return round_to_unit(tax_uvt * rules.uvt_value)
