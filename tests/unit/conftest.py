"""
Shared fixtures for unit tests
"""
import os

# No Datadog agent in unit tests
os.environ.setdefault('DD_TRACE_ENABLED', 'false')

from typing import List, Optional

import pytest

from application.dtos.responses import WeatherResponseDTO
from application.ports.output.analytics_port import IAnalyticsTracker
from application.ports.output.app_logger_port import IAppLogger
from application.ports.output.http_transport_port import HttpResponse, IHttpTransport
from domain.entities.weather import Weather


class AnalyticsTrackerSpy(IAnalyticsTracker):
    """Records every tracked event"""

    def __init__(self):
        self.events: List[str] = []

    @property
    def track_calls_count(self) -> int:
        return len(self.events)

    def track(self, event: str) -> None:
        self.events.append(event)


class LoggerSpy(IAppLogger):
    """Records every logged message"""

    def __init__(self):
        self.messages: List[str] = []

    @property
    def log_calls_count(self) -> int:
        return len(self.messages)

    def log(self, message: str) -> None:
        self.messages.append(message)


class StubTransport(IHttpTransport):
    """Answers a fixed HttpResponse (or raises) and records requested URLs"""

    def __init__(self, status: int = 200, body: bytes = b'', error: Optional[Exception] = None):
        self.status = status
        self.body = body
        self.error = error
        self.requested_urls: List[str] = []

    async def fetch(self, url: str) -> HttpResponse:
        self.requested_urls.append(url)
        if self.error is not None:
            raise self.error
        return HttpResponse(status=self.status, body=self.body, url=url)


@pytest.fixture
def analytics_spy():
    return AnalyticsTrackerSpy()


@pytest.fixture
def logger_spy():
    return LoggerSpy()


@pytest.fixture
def make_transport():
    """
    Factory fixture for StubTransport

    Usage:
        def test_something(make_transport):
            transport = make_transport(status=404)
    """
    def _make(status: int = 200, body: bytes = b'', error: Optional[Exception] = None) -> StubTransport:
        return StubTransport(status=status, body=body, error=error)

    return _make


@pytest.fixture
def current_weather_body():
    """Open-Meteo body factory with only the fields the client reads"""
    def _make(temperature=18.5, weathercode=1) -> bytes:
        return (
            '{"latitude": 43.7, "longitude": -79.42, '
            '"current_weather": {"temperature": %s, "windspeed": 11.2, '
            '"winddirection": 250, "weathercode": %s, "is_day": 1, '
            '"time": "2025-06-01T12:00"}}' % (temperature, weathercode)
        ).encode('utf-8')

    return _make


@pytest.fixture
def sample_dto():
    return WeatherResponseDTO(temperature=25.0, condition="Sunny")


@pytest.fixture
def sample_weather():
    return Weather(temperature_celsius=24.1, description="Partly Cloudy")
