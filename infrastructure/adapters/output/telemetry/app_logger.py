"""
App Loggers - IAppLogger implementations
"""
from aws_lambda_powertools import Logger

from application.ports.output.app_logger_port import IAppLogger
from shared.config.logger_config import get_logger


class DefaultLogger(IAppLogger):
    """Forwards messages to the Powertools logger at ERROR level"""

    def __init__(self, logger: Logger = None):
        self.logger = logger or get_logger(child=True)

    def log(self, message: str) -> None:
        try:
            self.logger.error(message)
        except Exception:
            pass


class DummyLogger(IAppLogger):
    """No-op logger for tests and previews that do not care about logging"""

    def log(self, message: str) -> None:
        pass
