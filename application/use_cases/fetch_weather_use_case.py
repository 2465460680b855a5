"""
Async Use Case: Fetch Weather
Seam between the presentation layer and the weather repository
"""
from ddtrace import tracer

from domain.entities.weather import Weather
from domain.repositories.weather_repository import IWeatherRepository
from application.ports.input.fetch_weather_port import IFetchWeatherUseCase


class FetchWeatherUseCase(IFetchWeatherUseCase):
    """Async use case: fetch the current weather of a city"""

    def __init__(self, repository: IWeatherRepository):
        self.repository = repository

    @tracer.wrap(resource="use_case.fetch_weather")
    async def execute(self, city: str) -> Weather:
        """
        Execute use case asynchronously

        Args:
            city: City name

        Returns:
            Weather entity

        Raises:
            Exception: Repository errors, unchanged
        """
        return await self.repository.get_weather(city)
