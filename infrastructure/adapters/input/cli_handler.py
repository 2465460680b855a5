"""
Input Adapter: Command line handler
Runs one weather fetch and prints the screen states
"""
import argparse
import asyncio
from typing import List, Optional

from infrastructure.adapters.input.console_view import ConsoleView
from infrastructure.adapters.output.providers.weather_provider_factory import MODE_FAKE
from infrastructure.container import build_weather_view_model, shutdown
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='simple-weather',
        description='Fetch the current weather (Open-Meteo, fixed Toronto coordinates)'
    )
    parser.add_argument('--city', default=settings.DEFAULT_CITY, help='City name (default: %(default)s)')
    parser.add_argument('--fake', action='store_true', help='Use the fixed fake API instead of Open-Meteo')
    return parser


async def run(city: str, mode: Optional[str] = None, view: Optional[ConsoleView] = None) -> int:
    """
    Fetches once and renders every state change

    Returns:
        0 when weather was shown, 1 when the fetch failed
    """
    view_model = build_weather_view_model(mode=mode, city=city)
    view_model.add_listener(view or ConsoleView())

    try:
        await view_model.fetch_weather()
    finally:
        await shutdown()

    return 1 if view_model.error_message else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    mode = MODE_FAKE if args.fake else None

    logger.debug("Starting simple-weather", city=args.city, mode=mode or settings.WEATHER_API_MODE)

    return asyncio.run(run(args.city, mode=mode))
