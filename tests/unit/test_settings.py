"""
Unit tests for settings.py
Tests configuration loading and environment variables
"""
import importlib
import os
from unittest.mock import patch

import pytest

from shared.config import settings


@pytest.fixture(autouse=True)
def restore_settings():
    yield
    importlib.reload(settings)


class TestSettings:
    """Tests for Settings configuration"""

    def test_settings_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(settings)

            assert settings.OPENMETEO_BASE_URL == 'https://api.open-meteo.com/v1'
            assert settings.FIXED_LATITUDE == 43.7
            assert settings.FIXED_LONGITUDE == -79.42
            assert settings.DEFAULT_CITY == 'Toronto'
            assert settings.WEATHER_API_MODE == 'live'
            assert settings.HTTP_TIMEOUT_TOTAL == 15

    @patch.dict(os.environ, {
        'OPENMETEO_BASE_URL': 'http://localhost:8080/v1/',
        'FIXED_LATITUDE': '45.5',
        'FIXED_LONGITUDE': '-73.57',
        'DEFAULT_CITY': 'Montreal',
        'WEATHER_API_MODE': 'FAKE',
        'HTTP_TIMEOUT_TOTAL': '5'
    })
    def test_settings_from_environment(self):
        importlib.reload(settings)

        assert settings.OPENMETEO_BASE_URL == 'http://localhost:8080/v1'
        assert settings.FIXED_LATITUDE == 45.5
        assert settings.FIXED_LONGITUDE == -73.57
        assert settings.DEFAULT_CITY == 'Montreal'
        assert settings.WEATHER_API_MODE == 'fake'
        assert settings.HTTP_TIMEOUT_TOTAL == 5
