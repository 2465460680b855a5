"""Open-Meteo Weather API - current weather client for the fixed Toronto location"""

import json
import math
from typing import Any, Optional

from ddtrace import tracer

from application.dtos.responses import WeatherResponseDTO
from application.ports.output.http_transport_port import IHttpTransport
from application.ports.output.weather_api_port import IWeatherAPIService
from domain.constants import API, WeatherCondition
from domain.exceptions import BadStatusException, ParseException
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def build_current_weather_url(
    base_url: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None
) -> str:
    """Builds the /forecast URL asking only for the current_weather block (settings fill the gaps)"""
    base_url = base_url or settings.OPENMETEO_BASE_URL
    latitude = settings.FIXED_LATITUDE if latitude is None else latitude
    longitude = settings.FIXED_LONGITUDE if longitude is None else longitude
    return f"{base_url}/forecast?latitude={latitude}&longitude={longitude}&current_weather=true"


class OpenMeteoWeatherAPIService(IWeatherAPIService):
    """
    Client for the Open-Meteo Forecast API (current_weather=true)

    The location is fixed at construction time: the city passed to
    fetch_weather is logged but does not select the coordinates.
    """

    def __init__(self, transport: IHttpTransport, url: Optional[str] = None):
        """
        Args:
            transport: HTTP transport performing the single GET
            url: Endpoint override (defaults to the configured fixed location)
        """
        self.transport = transport
        self.url = url or build_current_weather_url()

    @property
    def provider_name(self) -> str:
        return "OpenMeteo"

    @tracer.wrap(resource="openmeteo.fetch_weather")
    async def fetch_weather(self, city: str) -> WeatherResponseDTO:
        """
        Fetches the current weather

        Args:
            city: Requested city (does not affect the request)

        Returns:
            WeatherResponseDTO

        Raises:
            NetworkException: If the transport failed
            BadStatusException: If the status is not 200
            ParseException: If the body is not the expected JSON
        """
        logger.info("Fetching current weather", city=city, url=self.url)

        response = await self.transport.fetch(self.url)

        if response.status != API.HTTP_STATUS_OK:
            logger.warning("Weather API returned bad status", status=response.status, url=self.url)
            raise BadStatusException(
                f"Bad server response: HTTP {response.status}",
                details={"status": response.status, "url": self.url}
            )

        return self.parse_current_weather(response.body)

    @staticmethod
    def parse_current_weather(body: bytes) -> WeatherResponseDTO:
        """
        Parses an Open-Meteo body into a WeatherResponseDTO

        Args:
            body: Raw response body

        Returns:
            WeatherResponseDTO with the derived condition

        Raises:
            ParseException: If the body is not JSON or lacks current_weather fields
        """
        try:
            data = json.loads(body, parse_constant=_reject_constant)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueError
            raise ParseException("Cannot parse response: invalid JSON", details={"error": str(e)}) from e

        current = data.get('current_weather') if isinstance(data, dict) else None
        if not isinstance(current, dict):
            raise ParseException("Cannot parse response: missing current_weather")

        temperature = current.get('temperature')
        weather_code = current.get('weathercode')

        if not _is_number(temperature):
            raise ParseException(
                "Cannot parse response: invalid temperature",
                details={"temperature": repr(temperature)}
            )
        if not isinstance(weather_code, int) or isinstance(weather_code, bool):
            raise ParseException(
                "Cannot parse response: invalid weathercode",
                details={"weathercode": repr(weather_code)}
            )

        try:
            temperature = float(temperature)
        except OverflowError as e:
            raise ParseException(
                "Cannot parse response: temperature out of range",
                details={"error": str(e)}
            ) from e
        if not math.isfinite(temperature):
            raise ParseException(
                "Cannot parse response: temperature out of range",
                details={"temperature": repr(temperature)}
            )

        return WeatherResponseDTO(
            temperature=temperature,
            condition=WeatherCondition.classify(weather_code)
        )


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON literal: {name}")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but JSON true/false is not a temperature
    return isinstance(value, (int, float)) and not isinstance(value, bool)
