"""
Weather Provider Factory - picks the weather API client for the configured mode
"""
from typing import Optional

from application.ports.output.http_transport_port import IHttpTransport
from application.ports.output.weather_api_port import IWeatherAPIService
from infrastructure.adapters.output.http.aiohttp_transport import AiohttpTransport
from infrastructure.adapters.output.providers.fake import FakeWeatherAPIService
from infrastructure.adapters.output.providers.openmeteo import OpenMeteoWeatherAPIService
from shared.config import settings

MODE_LIVE = 'live'
MODE_FAKE = 'fake'


class WeatherProviderFactory:
    """
    Lazily creates and keeps the weather API client.
    'live' talks to Open-Meteo through aiohttp, 'fake' answers a fixed record.
    """

    def __init__(self, mode: Optional[str] = None, transport: Optional[IHttpTransport] = None):
        self.mode = (mode or settings.WEATHER_API_MODE).lower()
        if self.mode not in (MODE_LIVE, MODE_FAKE):
            raise ValueError(f"Unknown weather API mode: {self.mode!r} (expected 'live' or 'fake')")
        self.transport = transport
        self._provider: Optional[IWeatherAPIService] = None

    def get_weather_provider(self) -> IWeatherAPIService:
        """Returns the provider for the configured mode"""
        if self._provider is None:
            if self.mode == MODE_FAKE:
                self._provider = FakeWeatherAPIService()
            else:
                self._provider = OpenMeteoWeatherAPIService(transport=self.transport or AiohttpTransport())
        return self._provider
