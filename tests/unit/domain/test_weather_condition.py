"""
Unit Tests: WeatherCondition classification and domain exceptions
"""
import pytest

from domain.constants import WeatherCondition
from domain.exceptions import (
    BadStatusException,
    DomainException,
    NetworkException,
    ParseException,
    WeatherServiceException,
)


class TestWeatherConditionClassify:

    def test_boundary(self):
        assert WeatherCondition.classify(2) == "Clear"
        assert WeatherCondition.classify(3) == "Cloudy"

    @pytest.mark.parametrize("code", [0, 1, 2, -1])
    def test_below_threshold_is_clear(self, code):
        assert WeatherCondition.classify(code) == WeatherCondition.CLEAR

    @pytest.mark.parametrize("code", [3, 45, 61, 71, 95, 99, 1000])
    def test_threshold_and_above_is_cloudy(self, code):
        assert WeatherCondition.classify(code) == WeatherCondition.CLOUDY


class TestExceptionHierarchy:

    def test_network_is_a_bad_status(self):
        assert issubclass(NetworkException, BadStatusException)

    def test_parse_is_not_a_bad_status(self):
        assert not issubclass(ParseException, BadStatusException)

    @pytest.mark.parametrize("exc_type", [BadStatusException, NetworkException, ParseException])
    def test_all_are_weather_service_errors(self, exc_type):
        assert issubclass(exc_type, WeatherServiceException)
        assert issubclass(exc_type, DomainException)

    def test_message_and_details(self):
        ex = BadStatusException("Bad server response: HTTP 404", details={"status": 404})

        assert str(ex) == "Bad server response: HTTP 404"
        assert ex.message == "Bad server response: HTTP 404"
        assert ex.details == {"status": 404}

    def test_details_default_to_empty_dict(self):
        assert ParseException("Cannot parse response").details == {}
