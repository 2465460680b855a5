"""
Domain Exceptions - Weather lookup failures
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class WeatherServiceException(DomainException):
    """Raised when the weather API client cannot produce a response record"""
    pass


class BadStatusException(WeatherServiceException):
    """Raised when the weather API answers with a status other than 200"""
    pass


class NetworkException(BadStatusException):
    """Raised when the request never produced an HTTP response (connection, DNS, timeout)"""
    pass


class ParseException(WeatherServiceException):
    """Raised when the response body is not JSON or lacks the current weather fields"""
    pass
