"""
Domain constants - fixed values shared across the layers
"""


class API:
    """External API constants"""

    # Open-Meteo
    OPENMETEO_BASE_URL = "https://api.open-meteo.com/v1"

    # Fixed location (Toronto); the requested city never changes it
    FIXED_LATITUDE = 43.7
    FIXED_LONGITUDE = -79.42

    HTTP_STATUS_OK = 200

    # HTTP timeouts and pool limits
    HTTP_TIMEOUT_TOTAL = 15  # seconds
    HTTP_TIMEOUT_CONNECT = 5  # seconds
    HTTP_TIMEOUT_READ = 10  # seconds
    HTTP_CONNECTION_LIMIT = 10
    HTTP_CONNECTION_LIMIT_PER_HOST = 5
    DNS_CACHE_TTL = 300  # seconds


class WeatherCondition:
    """Two-bucket condition classification for Open-Meteo weather codes"""

    CLEAR = "Clear"
    CLOUDY = "Cloudy"

    # WMO codes 0-2 are clear to partly cloudy; 3 (overcast) and up count as cloudy
    CLOUDY_THRESHOLD = 3

    @staticmethod
    def classify(weather_code: int) -> str:
        """
        Classifies a weather code into a display condition

        Args:
            weather_code: WMO weather code reported by the API

        Returns:
            "Cloudy" for codes >= 3, "Clear" otherwise
        """
        if weather_code >= WeatherCondition.CLOUDY_THRESHOLD:
            return WeatherCondition.CLOUDY
        return WeatherCondition.CLEAR


class Presentation:
    """Presentation constants"""

    DEFAULT_CITY = "Toronto"
    FETCH_ERROR_MESSAGE = "Failed to fetch weather."
    TEMPERATURE_SUFFIX = "°C"

    # Analytics events
    EVENT_WEATHER_FETCHED = "WeatherFetched"
