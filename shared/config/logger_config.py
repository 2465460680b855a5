"""
Centralized logging configuration
Configures the AWS Lambda Powertools logger with the Datadog service name
"""
import os
from aws_lambda_powertools import Logger


def get_logger(service_name: str = None, child: bool = False) -> Logger:
    """
    Returns a configured Logger instance

    Args:
        service_name: Service name (if None, uses DD_SERVICE from the environment)
        child: If True, creates a child logger

    Returns:
        Configured Logger
    """
    if service_name is None:
        service_name = os.environ.get('DD_SERVICE', 'simple-weather')

    if child:
        return Logger(service=service_name, child=True)

    return Logger(service=service_name)


# Main application logger
logger = get_logger()
