"""
Weather View Data Mapper - domain entity to display strings
"""
from application.dtos.responses import WeatherViewData
from domain.constants import Presentation
from domain.entities.weather import Weather


class WeatherViewDataMapper:
    """Pure mapper Weather → WeatherViewData"""

    @staticmethod
    def map(weather: Weather) -> WeatherViewData:
        """
        Formats the temperature as whole degrees, truncated toward zero

        Examples:
            24.9 → "24°C", -1.5 → "-1°C"
        """
        return WeatherViewData(
            display_temp=f"{int(weather.temperature_celsius)}{Presentation.TEMPERATURE_SUFFIX}",
            display_condition=weather.description
        )
