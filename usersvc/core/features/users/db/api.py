# (c) Copyright Datacraft, 2026
"""
Users database API.

Every operation is a single parameterized statement. Writes are committed
on their own; nothing here spans more than one statement.
"""

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from .orm import User


async def list_users(session: AsyncSession) -> list[Row]:
	"""Return all users ordered by id; empty list when the table is empty."""
	stmt = (
		select(User.id, User.name, User.department, User.email)
		.order_by(User.id.asc())
	)
	result = await session.execute(stmt)
	return list(result.all())


async def create_user(
	session: AsyncSession,
	name: str,
	department: str,
	email: str,
) -> int:
	"""Insert a user and return the generated id."""
	stmt = (
		insert(User)
		.values(name=name, department=department, email=email)
		.returning(User.id)
	)
	result = await session.execute(stmt)
	user_id = result.scalar_one()
	await session.commit()
	return user_id


async def update_user(
	session: AsyncSession,
	user_id: int,
	name: str,
	department: str,
	email: str,
) -> int:
	"""
	Overwrite all mutable fields of a user.

	Returns the number of rows touched, 0 when no user has ``user_id``.
	"""
	stmt = (
		update(User)
		.where(User.id == user_id)
		.values(name=name, department=department, email=email)
	)
	result = await session.execute(stmt)
	await session.commit()
	return result.rowcount


async def delete_user(session: AsyncSession, user_id: int) -> int:
	"""Delete a user; returns the number of rows removed."""
	stmt = delete(User).where(User.id == user_id)
	result = await session.execute(stmt)
	await session.commit()
	return result.rowcount
