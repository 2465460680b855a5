"""
Input Adapter: Console View
Text rendering of the weather screen state
"""
import sys
from typing import Optional, TextIO

from infrastructure.adapters.input.weather_view_model import WeatherViewState

LOADING_TEXT = "Loading..."


def render(state: WeatherViewState) -> str:
    """
    Renders the state with the screen's precedence: loading, then result, then error

    Returns:
        Text to display ('' when there is nothing to show yet)
    """
    if state.is_loading:
        return LOADING_TEXT
    if state.weather_view_data is not None:
        return f"{state.weather_view_data.display_temp}\n{state.weather_view_data.display_condition}"
    if state.error_message is not None:
        return state.error_message
    return ""


class ConsoleView:
    """State listener writing each new rendering to a stream"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self._last_rendered: Optional[str] = None

    def __call__(self, state: WeatherViewState) -> None:
        text = render(state)
        if not text or text == self._last_rendered:
            return
        self._last_rendered = text
        self.stream.write(text + "\n")
        self.stream.flush()
