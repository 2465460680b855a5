"""
Fake Weather API - fixed response, not configurable
Used by the console entry point in fake mode and by integration-style tests
"""
from application.dtos.responses import WeatherResponseDTO
from application.ports.output.weather_api_port import IWeatherAPIService


class FakeWeatherAPIService(IWeatherAPIService):
    """Always answers 19.5°C, "Fake Cloudy" without touching the network"""

    TEMPERATURE = 19.5
    CONDITION = "Fake Cloudy"

    @property
    def provider_name(self) -> str:
        return "Fake"

    async def fetch_weather(self, city: str) -> WeatherResponseDTO:
        return WeatherResponseDTO(temperature=self.TEMPERATURE, condition=self.CONDITION)
