"""Shared configuration"""
from .settings import DEFAULT_CITY, OPENMETEO_BASE_URL, WEATHER_API_MODE
from .logger_config import get_logger, logger

__all__ = ['DEFAULT_CITY', 'OPENMETEO_BASE_URL', 'WEATHER_API_MODE', 'get_logger', 'logger']
