"""
Composition root - wires the weather screen once, for the entry point
"""
from typing import Optional

from domain.constants import API
from application.ports.output.analytics_port import IAnalyticsTracker
from application.ports.output.app_logger_port import IAppLogger
from application.ports.output.weather_api_port import IWeatherAPIService
from application.use_cases.fetch_weather_use_case import FetchWeatherUseCase
from infrastructure.adapters.input.weather_view_model import WeatherViewModel
from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.providers.weather_provider_factory import WeatherProviderFactory
from infrastructure.adapters.output.telemetry import DefaultAnalyticsTracker, DefaultLogger
from infrastructure.adapters.output.weather_repository import WeatherRepository
from shared.config import settings


def build_weather_view_model(
    mode: Optional[str] = None,
    city: Optional[str] = None,
    api: Optional[IWeatherAPIService] = None,
    analytics: Optional[IAnalyticsTracker] = None,
    logger: Optional[IAppLogger] = None
) -> WeatherViewModel:
    """
    Builds API client → repository → use case → view model

    Args:
        mode: 'live' or 'fake' (defaults to WEATHER_API_MODE)
        city: Initial city (defaults to DEFAULT_CITY)
        api: Explicit API client, bypasses the provider factory
        analytics: Analytics sink (defaults to DefaultAnalyticsTracker)
        logger: Log sink (defaults to DefaultLogger)

    Returns:
        Ready WeatherViewModel
    """
    if api is None:
        # The first call fixes the shared session timeouts
        get_aiohttp_session_manager(
            total_timeout=settings.HTTP_TIMEOUT_TOTAL,
            connect_timeout=API.HTTP_TIMEOUT_CONNECT,
            sock_read_timeout=API.HTTP_TIMEOUT_READ,
            limit=API.HTTP_CONNECTION_LIMIT,
            limit_per_host=API.HTTP_CONNECTION_LIMIT_PER_HOST,
            ttl_dns_cache=API.DNS_CACHE_TTL
        )
        api = WeatherProviderFactory(mode=mode).get_weather_provider()

    repository = WeatherRepository(api=api)
    use_case = FetchWeatherUseCase(repository=repository)

    return WeatherViewModel(
        fetch_weather_use_case=use_case,
        analytics=analytics or DefaultAnalyticsTracker(),
        logger=logger or DefaultLogger(),
        city=city
    )


async def shutdown() -> None:
    """Releases the shared HTTP session"""
    await get_aiohttp_session_manager().cleanup()
