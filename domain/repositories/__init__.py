"""Domain Repository Interfaces"""
from .weather_repository import IWeatherRepository

__all__ = ['IWeatherRepository']
