"""
Aiohttp Session Manager - one shared ClientSession per event loop
"""
import asyncio
from typing import Optional
import aiohttp

from domain.constants import API
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Holds the aiohttp session used by the transport

    The session is created lazily and is bound to the loop that created it;
    a closed session or a different running loop gets a fresh one.
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(
        self,
        total_timeout: int = API.HTTP_TIMEOUT_TOTAL,
        connect_timeout: int = API.HTTP_TIMEOUT_CONNECT,
        sock_read_timeout: int = API.HTTP_TIMEOUT_READ,
        limit: int = API.HTTP_CONNECTION_LIMIT,
        limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST,
        ttl_dns_cache: int = API.DNS_CACHE_TTL
    ):
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout
        self.sock_read_timeout = sock_read_timeout
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None

    @classmethod
    def get_instance(cls, **kwargs) -> 'AiohttpSessionManager':
        """Shared manager; keyword arguments only apply on first creation"""
        if cls._instance is None:
            cls._instance = cls(**kwargs)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forgets the shared manager without closing its session"""
        cls._instance = None

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Returns an open session bound to the running event loop

        Raises:
            RuntimeError: If called outside a running event loop
        """
        loop = asyncio.get_running_loop()

        if self._session is not None and not self._session.closed and self._session_loop is loop:
            return self._session

        try:
            await self.cleanup()
        except Exception as e:
            # A session left over from a finished loop may fail to close
            logger.warning("Error closing stale aiohttp session", error=str(e))

        self._session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(
                total=self.total_timeout,
                connect=self.connect_timeout,
                sock_read=self.sock_read_timeout
            ),
            connector=aiohttp.TCPConnector(
                limit=self.limit,
                limit_per_host=self.limit_per_host,
                ttl_dns_cache=self.ttl_dns_cache
            )
        )
        self._session_loop = loop
        logger.debug("Aiohttp session created", total_timeout=self.total_timeout)

        return self._session

    async def cleanup(self) -> None:
        """Closes the session; the entry point calls this before its loop ends"""
        session, self._session, self._session_loop = self._session, None, None
        if session is not None and not session.closed:
            await session.close()
            logger.debug("Aiohttp session closed")


def get_aiohttp_session_manager(**kwargs) -> AiohttpSessionManager:
    """Returns the shared session manager (see AiohttpSessionManager.__init__ for kwargs)"""
    return AiohttpSessionManager.get_instance(**kwargs)
