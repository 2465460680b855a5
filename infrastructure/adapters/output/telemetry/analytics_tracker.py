"""
Analytics Trackers - IAnalyticsTracker implementations
"""
from application.ports.output.analytics_port import IAnalyticsTracker
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class DefaultAnalyticsTracker(IAnalyticsTracker):
    """Writes analytics events as structured log lines"""

    def track(self, event: str) -> None:
        try:
            logger.info("Analytics event", analytics_event=event)
        except Exception:
            # Fire-and-forget: a broken log handler must not reach the caller
            pass


class DummyAnalyticsTracker(IAnalyticsTracker):
    """No-op tracker for tests and previews that do not care about analytics"""

    def track(self, event: str) -> None:
        pass
