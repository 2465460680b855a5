"""
Weather API Stub - configurable return value or error

Unlike FakeWeatherAPIService the outcome is set per instance, which lets a
single test drive the success and failure paths of the layers above.
"""
from typing import List, Optional

from application.dtos.responses import WeatherResponseDTO
from application.ports.output.weather_api_port import IWeatherAPIService


class WeatherAPIServiceStub(IWeatherAPIService):
    """Returns weather_to_return, or raises error_to_raise when set"""

    def __init__(
        self,
        weather_to_return: Optional[WeatherResponseDTO] = None,
        error_to_raise: Optional[Exception] = None
    ):
        self.weather_to_return = weather_to_return or WeatherResponseDTO(temperature=25.0, condition="Sunny")
        self.error_to_raise = error_to_raise
        self.requested_cities: List[str] = []

    @property
    def provider_name(self) -> str:
        return "Stub"

    async def fetch_weather(self, city: str) -> WeatherResponseDTO:
        self.requested_cities.append(city)
        if self.error_to_raise is not None:
            raise self.error_to_raise
        return self.weather_to_return
