"""
Weather Repository Interface
Defines the contract implemented by the infrastructure layer
"""
from abc import ABC, abstractmethod
from domain.entities.weather import Weather


class IWeatherRepository(ABC):
    """Interface for the weather repository"""

    @abstractmethod
    async def get_weather(self, city: str) -> Weather:
        """
        Fetches the current weather for a city

        Args:
            city: City name as typed by the user

        Returns:
            Weather: Current weather domain entity

        Raises:
            WeatherServiceException: If the API client fails (propagated unchanged)
        """
        pass
