"""
Unit Tests: composition root and provider factory
"""
import pytest

from application.dtos.responses import WeatherResponseDTO
from infrastructure.adapters.input.weather_view_model import WeatherViewModel
from infrastructure.adapters.output.providers import (
    FakeWeatherAPIService,
    OpenMeteoWeatherAPIService,
    WeatherAPIServiceStub,
    WeatherProviderFactory,
)
from infrastructure.adapters.output.telemetry import DefaultAnalyticsTracker, DefaultLogger
from infrastructure.container import build_weather_view_model


class TestWeatherProviderFactory:

    def test_fake_mode(self):
        assert isinstance(WeatherProviderFactory(mode="fake").get_weather_provider(), FakeWeatherAPIService)

    def test_live_mode_uses_given_transport(self, make_transport):
        transport = make_transport()
        provider = WeatherProviderFactory(mode="LIVE", transport=transport).get_weather_provider()

        assert isinstance(provider, OpenMeteoWeatherAPIService)
        assert provider.transport is transport

    def test_provider_is_cached(self):
        factory = WeatherProviderFactory(mode="fake")

        assert factory.get_weather_provider() is factory.get_weather_provider()

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown weather API mode"):
            WeatherProviderFactory(mode="mock")


class TestBuildWeatherViewModel:

    def test_default_sinks(self):
        view_model = build_weather_view_model(mode="fake")

        assert isinstance(view_model, WeatherViewModel)
        assert isinstance(view_model.analytics, DefaultAnalyticsTracker)
        assert isinstance(view_model.logger, DefaultLogger)
        assert view_model.city == "Toronto"

    @pytest.mark.asyncio
    async def test_wires_explicit_api(self, analytics_spy, logger_spy):
        stub = WeatherAPIServiceStub(weather_to_return=WeatherResponseDTO(temperature=28.0, condition="Sunny"))
        view_model = build_weather_view_model(
            city="Chicago", api=stub, analytics=analytics_spy, logger=logger_spy
        )

        await view_model.fetch_weather()

        assert stub.requested_cities == ["Chicago"]
        assert view_model.weather_view_data.display_temp == "28°C"
        assert view_model.weather_view_data.display_condition == "Sunny"
        assert analytics_spy.events == ["WeatherFetched"]
