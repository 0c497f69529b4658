"""
Configuration package for the hostel allocation service.

Holds environment settings and logging setup.
"""

from hostel_allocation.config.settings import Settings, get_settings, settings
from hostel_allocation.config.logging import get_logger, setup_logging

__all__ = ['Settings', 'get_settings', 'settings', 'get_logger', 'setup_logging']
