"""
Output Adapter: Weather Repository
Calls the weather API client and maps its record to the domain entity
"""
from ddtrace import tracer

from application.ports.output.weather_api_port import IWeatherAPIService
from domain.entities.weather import Weather
from domain.repositories.weather_repository import IWeatherRepository
from infrastructure.adapters.output.providers.openmeteo.mappers import WeatherDTOMapper


class WeatherRepository(IWeatherRepository):
    """Weather repository over a single IWeatherAPIService; no cache, no retry"""

    def __init__(self, api: IWeatherAPIService):
        """
        Args:
            api: Weather API client (Open-Meteo, fake or stub)
        """
        self.api = api

    @tracer.wrap(resource="repository.get_weather")
    async def get_weather(self, city: str) -> Weather:
        dto = await self.api.fetch_weather(city)
        return WeatherDTOMapper.map(dto)
