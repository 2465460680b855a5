"""Input Ports - contracts offered to the presentation layer"""
from .fetch_weather_port import IFetchWeatherUseCase

__all__ = ['IFetchWeatherUseCase']
