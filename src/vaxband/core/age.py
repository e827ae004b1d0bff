"""Exact calendar age from a birth date."""

from __future__ import annotations

import calendar
import logging
import re
from datetime import date, datetime

from vaxband.core.models import AgeBreakdown


logger = logging.getLogger(__name__)

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
HALF_MONTH_DAYS = 15


def parse_birth_date(value: str | date | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` birth date.

    Args:
        value: ISO calendar date string, or an already parsed date.

    Returns:
        The calendar date, or None when the value is not a valid date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not ISO_DATE_PATTERN.match(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _as_calendar_day(reference: date | datetime) -> date:
    return reference.date() if isinstance(reference, datetime) else reference


def _days_in_previous_month(day: date) -> int:
    year, month = (day.year - 1, 12) if day.month == 1 else (day.year, day.month - 1)
    return calendar.monthrange(year, month)[1]


def compute_age(
    birth_date: str | date | None, reference: date | datetime
) -> AgeBreakdown | None:
    """Compute the years/months/days elapsed from birth to the reference day.

    Args:
        birth_date: Birth date as ``YYYY-MM-DD`` or a date.
        reference: The moment treated as now. Only its calendar day is used.

    Returns:
        The age breakdown, or None when the birth date is unparseable or
        after the reference day.
    """
    born = parse_birth_date(birth_date)
    if born is None:
        logger.debug("Unparseable birth date: %r", birth_date)
        return None
    today = _as_calendar_day(reference)
    if born > today:
        logger.debug("Birth date %s is after reference %s", born, today)
        return None

    years = today.year - born.year
    months = today.month - born.month
    days = today.day - born.day

    if days < 0:
        days += _days_in_previous_month(today)
        months -= 1
        if days < 0:
            # Birth day does not exist in the borrowed month, anniversary falls on its last day
            days = today.day
    if months < 0:
        months += 12
        years -= 1

    total_months = years * 12 + months + (0.5 if days >= HALF_MONTH_DAYS else 0)
    return AgeBreakdown(years=years, months=months, days=days, total_months=total_months)
