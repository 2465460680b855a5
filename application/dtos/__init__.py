"""Application DTOs - Data Transfer Objects"""

from application.dtos.responses import WeatherResponseDTO, WeatherViewData

__all__ = ['WeatherResponseDTO', 'WeatherViewData']
