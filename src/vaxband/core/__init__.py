"""Core module - Age computation, banding and classification."""

from __future__ import annotations

from vaxband.core.age import compute_age, parse_birth_date
from vaxband.core.bands import BAND_RULES, classify_band
from vaxband.core.labs import LAB_RULES, recommend_labs
from vaxband.core.models import (
    AgeBreakdown,
    ClassifiedVaccine,
    Evaluation,
    LabRecommendation,
    LabRule,
    ReferenceTable,
    VaccineGroups,
    VaccineRecord,
)
from vaxband.core.status import cell_status
from vaxband.core.types import AgeBand, CellStatus, StatusType
from vaxband.core.vaccines import classify_vaccine, classify_vaccines


__all__ = [
    "BAND_RULES",
    "LAB_RULES",
    # Models
    "AgeBand",
    "AgeBreakdown",
    "CellStatus",
    "ClassifiedVaccine",
    "Evaluation",
    "LabRecommendation",
    "LabRule",
    "ReferenceTable",
    "StatusType",
    "VaccineGroups",
    "VaccineRecord",
    # Operations
    "cell_status",
    "classify_band",
    "classify_vaccine",
    "classify_vaccines",
    "compute_age",
    "parse_birth_date",
    "recommend_labs",
]
