"""
Aiohttp Transport - IHttpTransport backed by the shared aiohttp session
"""
import asyncio
from typing import Optional

import aiohttp

from application.ports.output.http_transport_port import HttpResponse, IHttpTransport
from domain.exceptions import NetworkException
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpTransport(IHttpTransport):
    """Performs GET requests through the session manager, never inspects the status"""

    def __init__(self, session_manager: Optional[AiohttpSessionManager] = None):
        self.session_manager = session_manager or get_aiohttp_session_manager()

    async def fetch(self, url: str) -> HttpResponse:
        """
        GET url and read the whole body

        Raises:
            NetworkException: On connection errors and timeouts
        """
        session = await self.session_manager.get_session()

        try:
            async with session.get(url) as response:
                body = await response.read()
                return HttpResponse(status=response.status, body=body, url=url)
        except asyncio.TimeoutError as e:
            logger.warning("HTTP request timed out", url=url)
            raise NetworkException("Request timed out", details={"url": url}) from e
        except aiohttp.ClientError as e:
            logger.warning("HTTP request failed", url=url, error=str(e))
            raise NetworkException(
                f"Network error: {e}",
                details={"url": url, "error_type": type(e).__name__}
            ) from e
