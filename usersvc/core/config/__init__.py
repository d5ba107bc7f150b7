# (c) Copyright Datacraft, 2026
"""Configuration module for usersvc."""
from .log_config import configure_logging
from .settings import Settings, get_settings

__all__ = [
	'Settings',
	'get_settings',
	'configure_logging',
]
