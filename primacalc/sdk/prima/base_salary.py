"""Base salary resolution for the prima.

Two methods:
- current: salary of the semester's last month (junio / diciembre)
- average: mean of the semester months present in the salary map

Any method value that isn't a 'current' token is treated as average.
"""

import logging
from typing import Any, Mapping

from .errors import MissingDataError
from .period import is_first_half, semester_months

logger = logging.getLogger(__name__)

CURRENT_METHOD_TOKENS = frozenset({"current", "actual"})


def is_current_method(method: Any) -> bool:
    """True if method selects the last month's salary."""
    return isinstance(method, str) and method in CURRENT_METHOD_TOKENS


def current_salary(salaries: Mapping[str, float], period: Any) -> float:
    """Salary of the semester's last month.

    Raises:
        MissingDataError: If that month is absent
    """
    month = "junio" if is_first_half(period) else "diciembre"
    if month not in salaries:
        raise MissingDataError(f"Missing salary for '{month}' required by the current method.")
    return salaries[month]


def average_salary(salaries: Mapping[str, float], period: Any) -> float:
    """Average of the semester months present in salaries.

    Missing months narrow the average instead of failing; this is logged
    as a warning.

    Raises:
        MissingDataError: If none of the semester months are present
    """
    months = semester_months(period)
    found = [salaries[m] for m in months if m in salaries]

    if not found:
        raise MissingDataError(f"No salaries found for semester months ({', '.join(months)}).")

    if len(found) < len(months):
        missing = [m for m in months if m not in salaries]
        logger.warning(f"Averaging {len(found)} of {len(months)} months, missing: {', '.join(missing)}")

    return sum(found) / float(len(found))


def resolve_base_salary(salaries: Mapping[str, float], method: Any, period: Any) -> float:
    """Get the reference monthly salary for the prima.

    Args:
        salaries: Month name -> salary
        method: salary_method value from the employee record
        period: calculation_period value from the employee record
    """
    if is_current_method(method):
        base = current_salary(salaries, period)
    else:
        base = average_salary(salaries, period)

    logger.debug(f"base salary ({'current' if is_current_method(method) else 'average'}): {base:.2f}")
    return base
