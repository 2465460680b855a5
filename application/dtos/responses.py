"""Response DTOs - output contracts of the API client and the presentation mappers"""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class WeatherResponseDTO:
    """Response record parsed from the weather API"""
    temperature: float  # °C
    condition: str  # "Cloudy" or "Clear", derived from the weather code


@dataclass(frozen=True)
class WeatherViewData:
    """Display-ready strings for the weather screen"""
    display_temp: str  # e.g. "18°C"
    display_condition: str

    def to_dict(self) -> Dict[str, Any]:
        """Converts to a dictionary"""
        return asdict(self)
