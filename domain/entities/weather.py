"""
Weather Entity - Domain entity for the current weather of a location
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Weather:
    """
    Current weather, independent of the API format and of display concerns

    Immutable (frozen=True); built only by WeatherDTOMapper.
    """
    temperature_celsius: float  # °C
    description: str  # e.g. "Clear", "Cloudy"
