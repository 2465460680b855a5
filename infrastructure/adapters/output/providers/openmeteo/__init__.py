"""Open-Meteo Provider Package"""

from infrastructure.adapters.output.providers.openmeteo.openmeteo_weather_api import (
    OpenMeteoWeatherAPIService,
    build_current_weather_url
)

__all__ = ['OpenMeteoWeatherAPIService', 'build_current_weather_url']
