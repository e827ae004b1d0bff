"""Data models for the vaccine band checker."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date  # noqa: TC003 - Pydantic needs at runtime
from typing import Any

from pydantic import BaseModel, Field

from vaxband.core.types import AgeBand, CellStatus, StatusType


EMPTY_DISPLAY = "—"


class AgeBreakdown(BaseModel):
    """Elapsed calendar time between a birth date and a reference date.

    ``total_months`` is only meant for banding: whole months plus 0.5 when
    at least 15 days have passed since the last monthly anniversary.
    """

    years: int = Field(ge=0)
    months: int = Field(ge=0, le=11)
    days: int = Field(ge=0, le=30)
    total_months: float = Field(ge=0.0)

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"{self.years}y {self.months}m {self.days}d"


class VaccineRecord(BaseModel):
    """One row of the reference table."""

    vaccine_name: str
    cells: dict[AgeBand, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def cell(self, band: AgeBand) -> str:
        """Get the cell text for a band, empty when the row lacks it."""
        return self.cells.get(band, "")


class ReferenceTable(BaseModel):
    """Ordered, read-only collection of vaccine records."""

    records: tuple[VaccineRecord, ...] = ()
    source: str = ""

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.records)

    @property
    def vaccine_names(self) -> list[str]:
        return [record.vaccine_name for record in self.records]


class ClassifiedVaccine(BaseModel):
    """A vaccine with its cell text for one band and the derived status."""

    vaccine_name: str
    cell_text: str
    cell_status: CellStatus

    model_config = {"frozen": True}

    @property
    def status_type(self) -> StatusType:
        return self.cell_status.status_type


class VaccineGroups(BaseModel):
    """Vaccines partitioned by status, each group in table order."""

    required: list[ClassifiedVaccine] = Field(default_factory=list)
    not_required: list[ClassifiedVaccine] = Field(default_factory=list)
    other: list[ClassifiedVaccine] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.required) + len(self.not_required) + len(self.other)


class LabRule(BaseModel):
    """Age threshold that produces one recommended lab test."""

    predicate: Callable[[int], bool]
    test_name: str
    rationale: str

    model_config = {"frozen": True}

    def applies(self, years: int) -> bool:
        return bool(self.predicate(years))


class LabRecommendation(BaseModel):
    """A lab test recommended for an age, with the reason."""

    test_name: str
    rationale: str

    model_config = {"frozen": True}


class Evaluation(BaseModel):
    """Everything computed for one birth date.

    When the birth date is invalid only ``birth_date`` and
    ``reference_date`` are set and the caller shows a prompt instead.
    """

    birth_date: str
    reference_date: date
    age: AgeBreakdown | None = None
    band: AgeBand | None = None
    vaccines: VaccineGroups | None = None
    labs: list[LabRecommendation] | None = None

    @property
    def is_valid(self) -> bool:
        return self.age is not None

    def to_display_data(self) -> dict[str, Any]:
        """Convert to plain data for presentation layers."""

        def group(items: list[ClassifiedVaccine]) -> list[dict[str, str]]:
            return [
                {
                    "vaccine": item.vaccine_name,
                    "cell": item.cell_text,
                    "status": item.cell_status.value,
                    "badge": item.cell_status.badge,
                }
                for item in items
            ]

        return {
            "birth_date": self.birth_date,
            "reference_date": self.reference_date.isoformat(),
            "valid": self.is_valid,
            "age": self.age.label if self.age else EMPTY_DISPLAY,
            "band": self.band.value if self.band else None,
            "band_label": self.band.label if self.band else EMPTY_DISPLAY,
            "required": group(self.vaccines.required) if self.vaccines else [],
            "not_required": group(self.vaccines.not_required) if self.vaccines else [],
            "other": group(self.vaccines.other) if self.vaccines else [],
            "labs": [
                {"name": lab.test_name, "reason": lab.rationale} for lab in self.labs or []
            ],
        }
