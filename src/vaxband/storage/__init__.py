"""Storage layer for the read-only reference table."""

from vaxband.storage.converters import row_to_vaccine_record
from vaxband.storage.table import (
    ReferenceTableError,
    default_table,
    load_reference_table,
    parse_table,
)

__all__ = [
    "ReferenceTableError",
    "default_table",
    "load_reference_table",
    "parse_table",
    "row_to_vaccine_record",
]
