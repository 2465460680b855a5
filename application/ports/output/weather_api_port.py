"""Weather API Port - client that turns the provider response into a response record"""
from abc import ABC, abstractmethod

from application.dtos.responses import WeatherResponseDTO


class IWeatherAPIService(ABC):
    """
    Interface for weather API clients.
    The live implementation talks to Open-Meteo; fakes and stubs
    implement the same contract for previews and tests.
    """

    @abstractmethod
    async def fetch_weather(self, city: str) -> WeatherResponseDTO:
        """
        Fetches current weather

        Args:
            city: Requested city

        Returns:
            WeatherResponseDTO with temperature and derived condition

        Raises:
            NetworkException: If the transport failed
            BadStatusException: If the status is not 200
            ParseException: If the body is not the expected JSON
        """
        pass
