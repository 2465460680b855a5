"""Telemetry adapters - analytics and log sinks"""
from infrastructure.adapters.output.telemetry.analytics_tracker import DefaultAnalyticsTracker, DummyAnalyticsTracker
from infrastructure.adapters.output.telemetry.app_logger import DefaultLogger, DummyLogger

__all__ = ['DefaultAnalyticsTracker', 'DummyAnalyticsTracker', 'DefaultLogger', 'DummyLogger']
