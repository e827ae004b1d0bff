"""Application settings and configuration."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vaxband.core.types import AgeBand


class BandColumns(BaseModel):
    """Reference table column header for each age band."""

    birth_to_1_month: str = "Birth— I month"
    months_2_to_11: str = "2—11 months"
    months_12_to_years_6: str = "12 months - 6 years"
    years_7_to_10: str = "7—10 years"
    years_11_to_17: str = "11—17 years"
    years_18_to_64: str = "18-64 years"
    years_65_plus: str = ">= 65 years"

    def as_mapping(self) -> dict[AgeBand, str]:
        """Map every age band to its column header."""
        return {
            AgeBand.BIRTH_TO_1_MONTH: self.birth_to_1_month,
            AgeBand.MONTHS_2_TO_11: self.months_2_to_11,
            AgeBand.MONTHS_12_TO_YEARS_6: self.months_12_to_years_6,
            AgeBand.YEARS_7_TO_10: self.years_7_to_10,
            AgeBand.YEARS_11_TO_17: self.years_11_to_17,
            AgeBand.YEARS_18_TO_64: self.years_18_to_64,
            AgeBand.YEARS_65_PLUS: self.years_65_plus,
        }


class TableSettings(BaseModel):
    """Reference table configuration."""

    path: str | None = None
    name_key: str = "Vaccines by applicant"
    columns: BandColumns = Field(default_factory=BandColumns)


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Reference table
    table: TableSettings = Field(default_factory=TableSettings)

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load flat environment variable overrides."""
        if path := os.getenv("VAXBAND_TABLE_PATH"):
            self.table.path = path
        if name_key := os.getenv("VAXBAND_NAME_KEY"):
            self.table.name_key = name_key
        if level := os.getenv("VAXBAND_LOG_LEVEL"):
            self.log_level = level.upper()
