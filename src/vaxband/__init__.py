"""vaxband - Age-based vaccine and lab checker.

This package provides:
- Exact calendar age computation from a date of birth
- Mapping of that age to one of seven clinical age bands
- Classification of a vaccine reference table for the band
- Age-threshold lab test recommendations
"""

from __future__ import annotations

from vaxband.config.settings import Settings
from vaxband.core.age import compute_age
from vaxband.core.bands import classify_band
from vaxband.core.labs import recommend_labs
from vaxband.core.models import (
    AgeBreakdown,
    ClassifiedVaccine,
    Evaluation,
    LabRecommendation,
    ReferenceTable,
    VaccineGroups,
    VaccineRecord,
)
from vaxband.core.types import AgeBand, CellStatus, StatusType
from vaxband.core.vaccines import classify_vaccines
from vaxband.orchestrator.evaluator import Evaluator
from vaxband.storage.table import ReferenceTableError, load_reference_table


__version__ = "0.1.0"

__all__ = [
    "AgeBand",
    "AgeBreakdown",
    "CellStatus",
    "ClassifiedVaccine",
    "Evaluation",
    "Evaluator",
    "LabRecommendation",
    "ReferenceTable",
    "ReferenceTableError",
    "Settings",
    "StatusType",
    "VaccineGroups",
    "VaccineRecord",
    "classify_band",
    "classify_vaccines",
    "compute_age",
    "load_reference_table",
    "recommend_labs",
]
