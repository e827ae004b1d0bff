"""Reference table loading."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

from vaxband.config.settings import Settings
from vaxband.core.models import ReferenceTable
from vaxband.storage.converters import row_to_vaccine_record


if TYPE_CHECKING:
    from vaxband.core.types import AgeBand

logger = logging.getLogger(__name__)
DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_TABLE_PATH = DATA_DIR / "vaccines.json"


class ReferenceTableError(Exception):
    """Raised when a reference table file cannot be loaded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot load reference table {self.path}: {reason}")


def parse_table(
    rows: Any, name_key: str, columns: dict[AgeBand, str], source: str = ""
) -> ReferenceTable:
    """Build a ReferenceTable from already decoded JSON rows.

    Raises:
        ReferenceTableError: If rows is not a list of objects.
    """
    if not isinstance(rows, list):
        raise ReferenceTableError(source, f"expected a list of rows, got {type(rows).__name__}")
    records = []
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise ReferenceTableError(source, f"row {index} is not an object")
        missing = [header for header in columns.values() if header not in row]
        if missing:
            logger.warning("Row %d (%s) is missing columns: %s", index, row.get(name_key), missing)
        records.append(row_to_vaccine_record(row, name_key, columns))
    return ReferenceTable(records=tuple(records), source=source)


def load_reference_table(
    path: str | Path | None = None, settings: Settings | None = None
) -> ReferenceTable:
    """Load a reference table from a JSON file.

    Args:
        path: Table file. Defaults to the configured path, then the bundled table.
        settings: Settings providing the column headers.

    Returns:
        The loaded, immutable table.

    Raises:
        ReferenceTableError: If the file is missing or malformed.
    """
    if settings is None:
        settings = Settings()
    table_path = Path(path or settings.table.path or DEFAULT_TABLE_PATH)
    try:
        rows = json.loads(table_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ReferenceTableError(table_path, "file not found") from e
    except json.JSONDecodeError as e:
        raise ReferenceTableError(table_path, f"invalid JSON ({e})") from e
    table = parse_table(
        rows, settings.table.name_key, settings.table.columns.as_mapping(), str(table_path)
    )
    logger.info("Loaded %d vaccines from %s", len(table), table_path.name)
    return table


@lru_cache(maxsize=1)
def default_table() -> ReferenceTable:
    """Get the process-wide reference table, loading it on first use."""
    return load_reference_table()
