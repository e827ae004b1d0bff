"""Age band classification."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from vaxband.core.types import AgeBand


if TYPE_CHECKING:
    from vaxband.core.models import AgeBreakdown

logger = logging.getLogger(__name__)

# First match wins. The sub-year rules use total_months (with its half-month
# rounding), everything from 7 years on uses whole years only.
BAND_RULES: tuple[tuple[Callable[[AgeBreakdown], bool], AgeBand], ...] = (
    (lambda age: age.total_months < 2, AgeBand.BIRTH_TO_1_MONTH),
    (lambda age: 2 <= age.total_months < 12, AgeBand.MONTHS_2_TO_11),
    (lambda age: age.total_months >= 12 and age.years < 7, AgeBand.MONTHS_12_TO_YEARS_6),
    (lambda age: 7 <= age.years <= 10, AgeBand.YEARS_7_TO_10),
    (lambda age: 11 <= age.years <= 17, AgeBand.YEARS_11_TO_17),
    (lambda age: 18 <= age.years <= 64, AgeBand.YEARS_18_TO_64),
    (lambda age: age.years >= 65, AgeBand.YEARS_65_PLUS),
)


def classify_band(age: AgeBreakdown | None) -> AgeBand | None:
    """Pick the age band for an age breakdown.

    Returns None when there is no age, or when no rule matches. The latter
    is an internal fault and is logged as an error.
    """
    if age is None:
        return None
    for matches, band in BAND_RULES:
        if matches(age):
            return band
    logger.error("No age band matched %s (total_months=%s)", age.label, age.total_months)
    return None
