"""Analytics Port - fire-and-forget event tracking"""
from abc import ABC, abstractmethod


class IAnalyticsTracker(ABC):
    """Interface for analytics sinks"""

    @abstractmethod
    def track(self, event: str) -> None:
        """Records an analytics event. Must not raise."""
        pass
