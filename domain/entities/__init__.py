"""Domain Entities"""
from .weather import Weather

__all__ = ['Weather']
