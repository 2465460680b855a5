"""
Unit Tests: analytics and log sinks, fake API client
"""
from unittest.mock import MagicMock

import pytest

from application.dtos.responses import WeatherResponseDTO
from infrastructure.adapters.output.providers.fake import FakeWeatherAPIService
from infrastructure.adapters.output.telemetry import (
    DefaultAnalyticsTracker,
    DefaultLogger,
    DummyAnalyticsTracker,
    DummyLogger,
)


class TestLogSinks:

    def test_default_logger_forwards_to_powertools(self):
        powertools_logger = MagicMock()

        DefaultLogger(logger=powertools_logger).log("Error: Server error")

        powertools_logger.error.assert_called_once_with("Error: Server error")

    def test_default_logger_never_raises(self):
        powertools_logger = MagicMock()
        powertools_logger.error.side_effect = OSError("stdout closed")

        DefaultLogger(logger=powertools_logger).log("Error: Server error")

    def test_dummy_logger(self):
        assert DummyLogger().log("anything") is None


class TestAnalyticsSinks:

    def test_default_tracker(self):
        assert DefaultAnalyticsTracker().track("WeatherFetched") is None

    def test_dummy_tracker(self):
        assert DummyAnalyticsTracker().track("WeatherFetched") is None


@pytest.mark.asyncio
class TestFakeWeatherAPIService:

    async def test_fixed_response_for_any_city(self):
        service = FakeWeatherAPIService()

        assert await service.fetch_weather("Toronto") == WeatherResponseDTO(temperature=19.5, condition="Fake Cloudy")
        assert await service.fetch_weather("Tokyo") == WeatherResponseDTO(temperature=19.5, condition="Fake Cloudy")
