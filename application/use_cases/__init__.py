"""Application Use Cases - async, decoupled from providers"""
from .fetch_weather_use_case import FetchWeatherUseCase

__all__ = ['FetchWeatherUseCase']
