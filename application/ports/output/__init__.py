"""
Output Ports - Interfaces for talking to external infrastructure
Define contracts implemented by the output adapters
"""

from .http_transport_port import HttpResponse, IHttpTransport
from .weather_api_port import IWeatherAPIService
from .analytics_port import IAnalyticsTracker
from .app_logger_port import IAppLogger

__all__ = ['HttpResponse', 'IHttpTransport', 'IWeatherAPIService', 'IAnalyticsTracker', 'IAppLogger']
