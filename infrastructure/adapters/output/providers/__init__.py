"""Infrastructure Providers - weather API client implementations"""

from infrastructure.adapters.output.providers.openmeteo import OpenMeteoWeatherAPIService
from infrastructure.adapters.output.providers.fake import FakeWeatherAPIService, WeatherAPIServiceStub
from infrastructure.adapters.output.providers.weather_provider_factory import WeatherProviderFactory

__all__ = ['OpenMeteoWeatherAPIService', 'FakeWeatherAPIService', 'WeatherAPIServiceStub', 'WeatherProviderFactory']
