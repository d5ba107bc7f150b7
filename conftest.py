# (c) Copyright Datacraft, 2026
"""
Shared test fixtures.

Tests run against an in-memory SQLite database through aiosqlite; the
``users`` table is created from the ORM mapping for each test.
"""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from usersvc.app import create_app
from usersvc.core.db import Base, Database

# Registers the users table on Base.metadata
from usersvc.core.features.users.db import orm  # noqa: F401

SQLITE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def db_env(monkeypatch):
	"""Environment with every required database variable set."""
	values = {
		"DB_HOST": "db.internal",
		"DB_USER": "app",
		"DB_PASSWORD": "secret",
		"DB_NAME": "users",
	}
	for key, value in values.items():
		monkeypatch.setenv(key, value)
	return values


@pytest.fixture
async def database():
	db = Database(
		SQLITE_URL,
		poolclass=StaticPool,
		connect_args={"check_same_thread": False},
	)
	async with db.engine.begin() as conn:
		await conn.run_sync(Base.metadata.create_all)
	yield db
	await db.dispose()


@pytest.fixture
def app(database):
	return create_app(database=database)


@pytest.fixture
async def api_client(app):
	async with AsyncClient(
		transport=ASGITransport(app=app),
		base_url="http://test",
	) as client:
		yield client
