"""In-process weather API clients (no network)"""

from infrastructure.adapters.output.providers.fake.fake_weather_api import FakeWeatherAPIService
from infrastructure.adapters.output.providers.fake.weather_api_stub import WeatherAPIServiceStub

__all__ = ['FakeWeatherAPIService', 'WeatherAPIServiceStub']
