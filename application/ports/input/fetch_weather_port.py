"""
Input Port: Interface for fetching the current weather of a city
"""
from abc import ABC, abstractmethod
from domain.entities.weather import Weather


class IFetchWeatherUseCase(ABC):
    """Interface for the fetch weather use case"""

    @abstractmethod
    async def execute(self, city: str) -> Weather:
        """
        Fetches the current weather of a city

        Args:
            city: City name

        Returns:
            Weather: Current weather

        Raises:
            Exception: Whatever the repository raises, unchanged
        """
        pass
