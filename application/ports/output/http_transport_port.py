"""HTTP Transport Port - single GET that hands back status and raw body"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResponse:
    """Raw HTTP result: status metadata plus the undecoded body"""
    status: int
    body: bytes
    url: str = ""


class IHttpTransport(ABC):
    """Interface for the network transport used by API clients"""

    @abstractmethod
    async def fetch(self, url: str) -> HttpResponse:
        """
        Performs a single GET request

        Args:
            url: Absolute URL to fetch

        Returns:
            HttpResponse with status and raw body (any status, not only 200)

        Raises:
            NetworkException: If no HTTP response could be obtained
        """
        pass
