"""Worked-day accounting within a semester window."""

import logging
from datetime import date
from typing import Any, Iterable

from .validation import parse_date

logger = logging.getLogger(__name__)


def calculate_worked_days(
    entry_date: date,
    unpaid_absences: Iterable[Any],
    semester_start: date,
    semester_end: date,
) -> int:
    """Count worked days in the semester, net of unpaid absences.

    Employees hired mid-semester are credited from their entry date. Each
    absence inside [effective start, semester end] removes one day,
    duplicates included. The result is not clamped and may be negative.

    Raises:
        InvalidDataError: If an absence date can't be parsed
    """
    start_date = max(semester_start, entry_date)
    total_days = (semester_end - start_date).days + 1

    absence_dates = [parse_date(absence, "unpaid_absences") for absence in unpaid_absences]
    deducted = sum(1 for d in absence_dates if start_date <= d <= semester_end)

    logger.debug(
        f"worked days: {total_days} from {start_date} to {semester_end}, "
        f"{deducted} of {len(absence_dates)} absences deducted"
    )
    return total_days - deducted
