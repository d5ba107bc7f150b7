# (c) Copyright Datacraft, 2026
import logging
import sys

import uvicorn
from pydantic import ValidationError

from usersvc.app import create_app
from usersvc.core.config import configure_logging, get_settings

logger = logging.getLogger("usersvc")


def main() -> None:
	try:
		settings = get_settings()
	except ValidationError as e:
		logging.basicConfig(level=logging.INFO)
		# Field names only; the error input holds every setting, password included
		fields = ", ".join(
			".".join(map(str, err["loc"])) for err in e.errors(include_input=False)
		)
		logger.critical(f"Invalid configuration: {fields}")
		sys.exit(1)

	configure_logging(settings)
	logger.info(f"Starting API service on {settings.host}:{settings.port}")
	# log_config=None keeps the configuration applied above
	uvicorn.run(
		create_app(settings),
		host=settings.host,
		port=settings.port,
		log_config=None,
	)


if __name__ == "__main__":
	main()
