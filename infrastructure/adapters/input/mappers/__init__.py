"""Presentation mappers"""
from infrastructure.adapters.input.mappers.weather_view_data_mapper import WeatherViewDataMapper

__all__ = ['WeatherViewDataMapper']
