"""Open-Meteo mappers"""
from infrastructure.adapters.output.providers.openmeteo.mappers.weather_dto_mapper import WeatherDTOMapper

__all__ = ['WeatherDTOMapper']
