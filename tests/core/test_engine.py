# (c) Copyright Datacraft, 2026
import ssl

import pytest

from usersvc.core.config import Settings
from usersvc.core.db import Database
from usersvc.core.db.engine import make_ssl_context
from usersvc.core.exceptions import ErrorKind, ServiceError


async def test_ping(database: Database):
	await database.ping()


async def test_ping_failure_is_unavailable(tmp_path):
	db = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'users.db'}")

	with pytest.raises(ServiceError) as exc_info:
		await db.ping()

	assert exc_info.value.kind is ErrorKind.UNAVAILABLE
	assert exc_info.value.__cause__ is not None
	await db.dispose()


async def test_session_factory_bound_to_engine(database: Database):
	async with database.session_factory() as session:
		assert session.bind is database.engine


def test_from_settings(db_env):
	db = Database.from_settings(Settings(_env_file=None))

	assert db.engine.url.drivername == "postgresql+asyncpg"
	assert db.engine.url.host == "db.internal"
	assert db.engine.url.database == "users"


def test_ssl_context_skips_verification():
	context = make_ssl_context()

	assert isinstance(context, ssl.SSLContext)
	assert context.check_hostname is False
	assert context.verify_mode == ssl.CERT_NONE
