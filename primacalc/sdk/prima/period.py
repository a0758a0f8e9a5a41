"""Semester window resolution.

The semester year always comes from the clock (today's year by default),
never from the employee's entry date.
"""

from datetime import date
from typing import Any, Callable, List, Tuple

Clock = Callable[[], date]

FIRST_HALF_TOKENS = frozenset({"first_half", "primer_semestre"})

FIRST_HALF_MONTHS = ["enero", "febrero", "marzo", "abril", "mayo", "junio"]
SECOND_HALF_MONTHS = ["julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre"]


def is_first_half(period: Any) -> bool:
    """True if period names the January-June semester.

    Any other value, known or not, selects the second half.
    """
    return isinstance(period, str) and period in FIRST_HALF_TOKENS


def semester_months(period: Any) -> List[str]:
    """Spanish month names belonging to the semester, in calendar order."""
    return list(FIRST_HALF_MONTHS if is_first_half(period) else SECOND_HALF_MONTHS)


def resolve_semester(period: Any, clock: Clock = date.today) -> Tuple[date, date]:
    """Get the closed [start, end] date window for a semester.

    Args:
        period: calculation_period value from the employee record
        clock: Zero-argument callable returning the current date

    Returns:
        Tuple of (semester_start, semester_end)
    """
    year = clock().year
    if is_first_half(period):
        return date(year, 1, 1), date(year, 6, 30)
    return date(year, 7, 1), date(year, 12, 31)
