# (c) Copyright Datacraft, 2026
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from usersvc.core.config import Settings, get_settings
from usersvc.core.context import AppContext
from usersvc.core.db import Database
from usersvc.core.exceptions import ServiceError, register_exception_handlers
from usersvc.core.features.users.router import page_router, router as users_router
from usersvc.core.version import __version__

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Ping the database before serving; dispose of the pool on shutdown."""
	context: AppContext = app.state.context

	# Startup
	logger.info("Starting users API server...")
	try:
		try:
			await context.database.ping()
		except ServiceError as e:
			logger.critical(str(e))
			raise

		yield

		# Shutdown
		logger.info("Shutting down users API server...")
	finally:
		await context.database.dispose()


def create_app(
	settings: Settings | None = None,
	database: Database | None = None,
) -> FastAPI:
	"""
	Build the application and its context.

	With no arguments the settings come from the environment, which makes
	this usable as a uvicorn ``--factory`` target.
	"""
	if settings is None and database is None:
		settings = get_settings()

	app = FastAPI(
		title="Users REST API",
		version=__version__,
		lifespan=lifespan,
	)
	app.state.context = AppContext.create(settings=settings, database=database)

	register_exception_handlers(app)
	app.include_router(page_router)
	app.include_router(users_router)

	return app
