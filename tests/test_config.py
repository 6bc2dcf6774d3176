"""
Tests for settings read from the environment
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import Settings, get_settings, set_settings
from database.types import date_from_values


@pytest.fixture(autouse=True)
def reset_settings():
    set_settings(None)
    yield
    set_settings(None)


class TestSettings:
    """Test defaults, overrides and the global instance"""

    def test_defaults(self, monkeypatch):
        for name in ('RESULTS_DIR', 'REFERENCE_DATE', 'LOG_LEVEL'):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()

        assert settings.results_dir == 'Resultados'
        assert settings.reference_date == date_from_values(2023, 10, 1)
        assert settings.log_level == 'WARNING'

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv('RESULTS_DIR', 'out')
        monkeypatch.setenv('REFERENCE_DATE', '2024/01/31')
        monkeypatch.setenv('LOG_LEVEL', 'debug')
        settings = Settings.from_env()

        assert settings.results_dir == 'out'
        assert settings.reference_date == date_from_values(2024, 1, 31)
        assert settings.log_level == 'DEBUG'

    def test_invalid_reference_date(self, monkeypatch):
        monkeypatch.setenv('REFERENCE_DATE', '2024-01-31')
        with pytest.raises(ValueError):
            Settings.from_env()

    def test_global_instance(self):
        assert get_settings() is get_settings()

        custom = Settings(results_dir='x', reference_date=date_from_values(2000, 1, 1), log_level='INFO')
        set_settings(custom)
        assert get_settings() is custom
