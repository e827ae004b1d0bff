"""Tests for application settings."""

from __future__ import annotations

from vaxband.config.settings import BandColumns, Settings
from vaxband.core.types import AgeBand


class TestBandColumns:
    """Column headers per band."""

    def test_default_headers(self):
        mapping = BandColumns().as_mapping()

        assert mapping[AgeBand.BIRTH_TO_1_MONTH] == "Birth— I month"
        assert mapping[AgeBand.MONTHS_2_TO_11] == "2—11 months"
        assert mapping[AgeBand.MONTHS_12_TO_YEARS_6] == "12 months - 6 years"
        assert mapping[AgeBand.YEARS_65_PLUS] == ">= 65 years"

    def test_every_band_has_a_distinct_header(self):
        mapping = BandColumns().as_mapping()

        assert list(mapping) == list(AgeBand)
        assert len(set(mapping.values())) == len(AgeBand)


class TestSettings:
    """Defaults and environment overrides."""

    def test_defaults(self):
        settings = Settings()

        assert settings.table.path is None
        assert settings.table.name_key == "Vaccines by applicant"
        assert settings.log_level == "INFO"

    def test_flat_env_overrides(self, monkeypatch):
        monkeypatch.setenv("VAXBAND_TABLE_PATH", "/tmp/table.json")
        monkeypatch.setenv("VAXBAND_NAME_KEY", "Vaccine")
        monkeypatch.setenv("VAXBAND_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.table.path == "/tmp/table.json"
        assert settings.table.name_key == "Vaccine"
        assert settings.log_level == "DEBUG"

    def test_nested_env(self, monkeypatch):
        monkeypatch.setenv("TABLE__COLUMNS__YEARS_65_PLUS", "65+")
        settings = Settings()
        assert settings.table.columns.as_mapping()[AgeBand.YEARS_65_PLUS] == "65+"

    def test_explicit_values(self):
        settings = Settings(log_level="WARNING")
        assert settings.log_level == "WARNING"
