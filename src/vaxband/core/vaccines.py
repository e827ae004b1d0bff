"""Vaccine classification for an age band."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vaxband.core.models import ClassifiedVaccine, VaccineGroups
from vaxband.core.status import cell_status
from vaxband.core.types import StatusType


if TYPE_CHECKING:
    from collections.abc import Iterable

    from vaxband.core.models import VaccineRecord
    from vaxband.core.types import AgeBand

logger = logging.getLogger(__name__)


def classify_vaccine(band: AgeBand, record: VaccineRecord) -> ClassifiedVaccine:
    """Classify a single record for a band."""
    text = record.cell(band)
    return ClassifiedVaccine(
        vaccine_name=record.vaccine_name, cell_text=text, cell_status=cell_status(text)
    )


def classify_vaccines(band: AgeBand, table: Iterable[VaccineRecord]) -> VaccineGroups:
    """Partition the table into required, not required and other vaccines.

    Every record lands in exactly one group and table order is kept within
    each group.

    Args:
        band: Age band selecting the table column.
        table: Ordered vaccine records.

    Returns:
        The three groups of classified vaccines.

    Raises:
        ValueError: If band is None. Callers must handle a missing age first.
    """
    if band is None:
        raise ValueError("classify_vaccines requires an age band")
    groups = VaccineGroups()
    targets = {
        StatusType.REQUIRED: groups.required,
        StatusType.NOT_REQUIRED: groups.not_required,
        StatusType.SOMETIMES_OR_INFO: groups.other,
    }
    for record in table:
        item = classify_vaccine(band, record)
        targets[item.status_type].append(item)
    logger.debug(
        "Band %s: %d required, %d not required, %d other",
        band.value, len(groups.required), len(groups.not_required), len(groups.other),
    )
    return groups
