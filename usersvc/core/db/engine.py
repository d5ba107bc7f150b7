# (c) Copyright Datacraft, 2026
"""Database gateway: one async engine shared by all requests."""
import logging
import ssl
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from usersvc.core.config import Settings
from usersvc.core.exceptions import ErrorKind, ServiceError

logger = logging.getLogger(__name__)


def make_ssl_context() -> ssl.SSLContext:
	# asyncpg requires an SSL context, not sslmode
	ssl_context = ssl.create_default_context()
	ssl_context.check_hostname = False
	ssl_context.verify_mode = ssl.CERT_NONE
	return ssl_context


class Database:
	"""
	Owns the engine (and so the connection pool) plus a session factory.

	Pooling and concurrent statement execution are left to SQLAlchemy and
	the driver.
	"""

	def __init__(self, url: str | URL, *, ssl: bool = False, **engine_kwargs: Any):
		connect_args = dict(engine_kwargs.pop("connect_args", {}))
		if ssl:
			connect_args["ssl"] = make_ssl_context()

		self.engine: AsyncEngine = create_async_engine(
			url,
			connect_args=connect_args,
			**engine_kwargs,
		)
		self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

	@classmethod
	def from_settings(cls, settings: Settings) -> "Database":
		return cls(settings.db_url, ssl=settings.db_ssl)

	async def ping(self) -> None:
		"""Run ``SELECT 1``; raise ``ServiceError(UNAVAILABLE)`` if it fails."""
		try:
			async with self.engine.connect() as conn:
				await conn.execute(text("SELECT 1"))
		except (SQLAlchemyError, OSError) as e:
			raise ServiceError(ErrorKind.UNAVAILABLE, f"Failed to ping database: {e}") from e
		logger.info("Successfully connected to the database")

	async def dispose(self) -> None:
		await self.engine.dispose()
