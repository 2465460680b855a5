"""
Centralized application settings
"""
import os

from domain.constants import API, Presentation

# Weather API (Open-Meteo requires no key)
OPENMETEO_BASE_URL = os.environ.get('OPENMETEO_BASE_URL', API.OPENMETEO_BASE_URL).rstrip('/')

# Fixed location used for every lookup (Toronto)
FIXED_LATITUDE = float(os.environ.get('FIXED_LATITUDE', str(API.FIXED_LATITUDE)))
FIXED_LONGITUDE = float(os.environ.get('FIXED_LONGITUDE', str(API.FIXED_LONGITUDE)))

# City shown when the screen starts
DEFAULT_CITY = os.environ.get('DEFAULT_CITY', Presentation.DEFAULT_CITY)

# API client selection: 'live' hits Open-Meteo, 'fake' returns a fixed record
WEATHER_API_MODE = os.environ.get('WEATHER_API_MODE', 'live').lower()

# HTTP (seconds)
HTTP_TIMEOUT_TOTAL = int(os.environ.get('HTTP_TIMEOUT_TOTAL', str(API.HTTP_TIMEOUT_TOTAL)))
