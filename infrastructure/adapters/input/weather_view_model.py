"""
Input Adapter: Weather View Model
Presentation state holder for the weather screen; drives the fetch use case
"""
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from application.dtos.responses import WeatherViewData
from application.ports.input.fetch_weather_port import IFetchWeatherUseCase
from application.ports.output.analytics_port import IAnalyticsTracker
from application.ports.output.app_logger_port import IAppLogger
from domain.constants import Presentation
from domain.exceptions import DomainException
from infrastructure.adapters.input.mappers import WeatherViewDataMapper
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


@dataclass
class WeatherViewState:
    """Mutable state rendered by the weather screen"""
    city: str = Presentation.DEFAULT_CITY
    weather_view_data: Optional[WeatherViewData] = None
    is_loading: bool = False
    error_message: Optional[str] = None


StateListener = Callable[[WeatherViewState], None]


def describe_error(error: BaseException) -> str:
    """Human readable description of an error, for the log sink only"""
    if isinstance(error, DomainException):
        return error.message
    return str(error) or type(error).__name__


class WeatherViewModel:
    """
    Owns the weather screen state (city, view data, loading flag, error message)

    Flow of fetch_weather():
    1. is_loading = True, error_message cleared
    2. use case executed with the city captured at call time
    3. success: view data set, "WeatherFetched" tracked
       failure: fixed error message set, error description sent to the log sink
    4. is_loading = False

    A trigger arriving while a fetch is in flight is ignored.
    Listeners receive a snapshot of the state after every change.
    Listener and analytics failures are logged and never alter the state.
    """

    def __init__(
        self,
        fetch_weather_use_case: IFetchWeatherUseCase,
        analytics: IAnalyticsTracker,
        logger: IAppLogger,
        city: Optional[str] = None
    ):
        self.fetch_weather_use_case = fetch_weather_use_case
        self.analytics = analytics
        self.logger = logger
        self._state = WeatherViewState(city=city if city is not None else settings.DEFAULT_CITY)
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> WeatherViewState:
        """Snapshot of the current state"""
        return replace(self._state)

    @property
    def city(self) -> str:
        return self._state.city

    @city.setter
    def city(self, value: str) -> None:
        self._update(city=value)

    @property
    def weather_view_data(self) -> Optional[WeatherViewData]:
        return self._state.weather_view_data

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error_message(self) -> Optional[str]:
        return self._state.error_message

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def fetch_weather(self) -> None:
        """Runs one fetch for the current city and updates the state"""
        if self._state.is_loading:
            logger.debug("Fetch already in progress, ignoring trigger", city=self._state.city)
            return

        self._update(is_loading=True, error_message=None)
        city = self._state.city

        try:
            weather = await self.fetch_weather_use_case.execute(city)
            self._update(weather_view_data=WeatherViewDataMapper.map(weather))
        except Exception as e:
            self._update(weather_view_data=None, error_message=Presentation.FETCH_ERROR_MESSAGE)
            self.logger.log(f"Error: {describe_error(e)}")
        else:
            self._track(Presentation.EVENT_WEATHER_FETCHED)
        finally:
            self._update(is_loading=False)

    def _track(self, event: str) -> None:
        # Analytics is fire-and-forget: a failing sink never changes the outcome
        try:
            self.analytics.track(event)
        except Exception as e:
            logger.warning("Analytics tracking failed", event=event, error=str(e))

    def _update(self, **changes) -> None:
        """Applies the changes, then hands a snapshot to every listener"""
        for name, value in changes.items():
            setattr(self._state, name, value)

        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.warning("State listener failed", listener=repr(listener), error=str(e))
