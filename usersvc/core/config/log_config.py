# (c) Copyright Datacraft, 2026
"""Logging setup from a YAML dictConfig file."""
import logging
from logging.config import dictConfig
from pathlib import Path

import yaml

from .settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_LOGGING_CFG = Path(__file__).parent / "logging.yaml"


def load_logging_config(path: Path) -> dict:
	with open(path, "r") as stream:
		return yaml.safe_load(stream)


def configure_logging(settings: Settings) -> None:
	"""
	Apply the logging configuration.

	A user supplied ``LOG_CONFIG`` file wins; otherwise the packaged default
	is used with the root level taken from ``LOG_LEVEL``.
	"""
	path = settings.log_config
	if path is not None and path.exists() and path.is_file():
		dictConfig(load_logging_config(path))
		logger.debug(f"Logging configured from {path}")
		return

	config = load_logging_config(DEFAULT_LOGGING_CFG)
	config["root"]["level"] = settings.log_level.upper()
	dictConfig(config)
	if path is not None:
		logger.warning(f"Logging config {path} not found, using defaults")
