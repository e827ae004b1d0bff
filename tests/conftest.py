"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from vaxband.config.settings import BandColumns
from vaxband.core.models import ReferenceTable, VaccineRecord
from vaxband.core.types import AgeBand


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def reference_date() -> date:
    """Fixed reference day used by the documented scenarios."""
    return date(2024, 6, 15)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of Settings."""
    for name in ("VAXBAND_TABLE_PATH", "VAXBAND_NAME_KEY", "VAXBAND_LOG_LEVEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_table() -> ReferenceTable:
    """Small table covering every status for the 18-64 band."""
    return ReferenceTable(
        records=(
            VaccineRecord(
                vaccine_name="Td/Tdap",
                cells={AgeBand.YEARS_18_TO_64: "YES", AgeBand.BIRTH_TO_1_MONTH: "NO"},
            ),
            VaccineRecord(
                vaccine_name="Rotavirus",
                cells={AgeBand.YEARS_18_TO_64: "NO", AgeBand.BIRTH_TO_1_MONTH: "NO"},
            ),
            VaccineRecord(
                vaccine_name="Meningococcal",
                cells={
                    AgeBand.YEARS_18_TO_64: "Sometimes — consult physician",
                    AgeBand.BIRTH_TO_1_MONTH: "NO",
                },
            ),
            VaccineRecord(
                vaccine_name="Influenza",
                cells={AgeBand.YEARS_18_TO_64: "yes, annually", AgeBand.BIRTH_TO_1_MONTH: "NO"},
            ),
            VaccineRecord(
                vaccine_name="COVID-19",
                cells={AgeBand.YEARS_18_TO_64: "See current guidance"},
            ),
        ),
        source="sample",
    )


@pytest.fixture
def table_rows() -> list[dict[str, object]]:
    """Raw JSON rows keyed by the default column headers."""
    headers = BandColumns().as_mapping()
    return [
        {"Vaccines by applicant": "Hepatitis B", **dict.fromkeys(headers.values(), "YES")},
        {"Vaccines by applicant": "Zoster", **dict.fromkeys(headers.values(), "NO")},
    ]


@pytest.fixture
def table_file(tmp_path: Path, table_rows: list[dict[str, object]]) -> Path:
    """Write the raw rows to a temporary JSON table."""
    path = tmp_path / "vaccines.json"
    path.write_text(json.dumps(table_rows, ensure_ascii=False), encoding="utf-8")
    return path
