# (c) Copyright Datacraft, 2026
"""
Users feature test fixtures.
"""
import pytest
from sqlalchemy import func, select, text

from usersvc.core.db import Database
from usersvc.core.features.users.db.orm import User


@pytest.fixture
async def make_user(database: Database):
	"""Factory fixture for inserting users directly."""
	async def _make_user(
		name: str = "Test User",
		department: str = "Engineering",
		email: str = "test@example.com",
	) -> User:
		async with database.session_factory() as session:
			user = User(name=name, department=department, email=email)
			session.add(user)
			await session.commit()
			await session.refresh(user)
			return user

	return _make_user


@pytest.fixture
def count_users(database: Database):
	async def _count_users() -> int:
		async with database.session_factory() as session:
			result = await session.execute(select(func.count()).select_from(User))
			return result.scalar_one()

	return _count_users


@pytest.fixture
def drop_users_table(database: Database):
	"""Make every statement against ``users`` fail."""
	async def _drop():
		async with database.engine.begin() as conn:
			await conn.execute(text("DROP TABLE users"))

	return _drop
