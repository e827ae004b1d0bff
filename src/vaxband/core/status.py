"""Status detection for band cell text."""

from __future__ import annotations

from vaxband.core.types import CellStatus


# Checked in order, first match wins.
STATUS_PREFIXES: tuple[tuple[str, CellStatus], ...] = (
    ("YES", CellStatus.YES),
    ("SOMETIMES", CellStatus.SOMETIMES),
    ("NO", CellStatus.NO),
)


def cell_status(text: str | None) -> CellStatus:
    """Classify a band cell by its leading word.

    Matching is case-insensitive and ignores surrounding whitespace. Text
    that starts with none of the known prefixes, including empty text, is
    INFO.
    """
    normalized = (text or "").strip().upper()
    for prefix, status in STATUS_PREFIXES:
        if normalized.startswith(prefix):
            return status
    return CellStatus.INFO
