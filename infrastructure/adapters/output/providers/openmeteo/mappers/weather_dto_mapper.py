"""
Weather DTO Mapper - API response record to domain entity
LOCATION: infrastructure (knows the response record shape)
"""
from application.dtos.responses import WeatherResponseDTO
from domain.entities.weather import Weather


class WeatherDTOMapper:
    """Pure mapper WeatherResponseDTO → Weather"""

    @staticmethod
    def map(dto: WeatherResponseDTO) -> Weather:
        return Weather(temperature_celsius=dto.temperature, description=dto.condition)
