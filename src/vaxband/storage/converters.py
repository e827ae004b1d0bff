"""Converters for raw table rows to model objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vaxband.core.models import VaccineRecord


if TYPE_CHECKING:
    from vaxband.core.types import AgeBand


def _cell_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def row_to_vaccine_record(
    row: dict[str, Any], name_key: str, columns: dict[AgeBand, str]
) -> VaccineRecord:
    """Convert a raw table row to a VaccineRecord.

    Bands whose header is missing from the row, or whose cell is null, are
    left out of the record.
    """
    cells: dict[AgeBand, str] = {}
    for band, header in columns.items():
        text = _cell_text(row.get(header))
        if text is not None:
            cells[band] = text
    return VaccineRecord(vaccine_name=_cell_text(row.get(name_key)) or "", cells=cells)
