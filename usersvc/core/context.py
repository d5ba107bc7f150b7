# (c) Copyright Datacraft, 2026
"""Application context built once at startup and injected into handlers."""
from collections.abc import AsyncIterator
from dataclasses import dataclass
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from usersvc.core.config import Settings
from usersvc.core.db import Database

TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True, slots=True)
class AppContext:
	"""
	Everything request handlers need, held on ``app.state.context``.

	Replaces module level database handles and router instances; a test
	can build its own context around any ``Database``.
	"""
	settings: Settings | None
	database: Database
	templates: Jinja2Templates

	@classmethod
	def create(
		cls,
		settings: Settings | None = None,
		database: Database | None = None,
	) -> "AppContext":
		if database is None:
			if settings is None:
				raise ValueError("Either settings or database is required")
			database = Database.from_settings(settings)
		return cls(
			settings=settings,
			database=database,
			templates=Jinja2Templates(directory=str(TEMPLATES_DIR)),
		)


def get_context(request: Request) -> AppContext:
	return request.app.state.context


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
	context = get_context(request)
	async with context.database.session_factory() as session:
		yield session
