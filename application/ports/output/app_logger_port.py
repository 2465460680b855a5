"""App Logger Port - fire-and-forget diagnostic messages"""
from abc import ABC, abstractmethod


class IAppLogger(ABC):
    """Interface for log sinks used by the presentation layer"""

    @abstractmethod
    def log(self, message: str) -> None:
        """Writes a diagnostic message. Must not raise."""
        pass
