"""Core type definitions and enums."""

from __future__ import annotations

from enum import Enum


_BAND_LABELS = {
    "birth_to_1_month": "Birth to 1 month",
    "2_to_11_months": "2–11 months",
    "12_months_to_6_years": "12 months–6 years",
    "7_to_10_years": "7–10 years",
    "11_to_17_years": "11–17 years",
    "18_to_64_years": "18–64 years",
    "65_plus_years": "≥65 years",
}


class AgeBand(str, Enum):
    """Clinical age bands, declared in increasing age order."""

    BIRTH_TO_1_MONTH = "birth_to_1_month"
    MONTHS_2_TO_11 = "2_to_11_months"
    MONTHS_12_TO_YEARS_6 = "12_months_to_6_years"
    YEARS_7_TO_10 = "7_to_10_years"
    YEARS_11_TO_17 = "11_to_17_years"
    YEARS_18_TO_64 = "18_to_64_years"
    YEARS_65_PLUS = "65_plus_years"

    @property
    def rank(self) -> int:
        return list(AgeBand).index(self)

    @property
    def label(self) -> str:
        return _BAND_LABELS[self.value]

    # str comparison would order by value text, not by age
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AgeBand):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, AgeBand):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, AgeBand):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, AgeBand):
            return NotImplemented
        return self.rank >= other.rank


class StatusType(str, Enum):
    """Three-way status of a band cell."""

    REQUIRED = "required"
    NOT_REQUIRED = "not_required"
    SOMETIMES_OR_INFO = "sometimes_or_info"


class CellStatus(str, Enum):
    """Status detected from the leading word of a band cell.

    INFO is the fallback for any free text that does not start with
    YES, SOMETIMES or NO.
    """

    YES = "yes"
    SOMETIMES = "sometimes"
    NO = "no"
    INFO = "info"

    @property
    def status_type(self) -> StatusType:
        if self is CellStatus.YES:
            return StatusType.REQUIRED
        if self is CellStatus.NO:
            return StatusType.NOT_REQUIRED
        return StatusType.SOMETIMES_OR_INFO

    @property
    def badge(self) -> str:
        return self.value.upper()
