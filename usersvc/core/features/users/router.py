# (c) Copyright Datacraft, 2026
"""Users API router and HTML listing page."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from usersvc.core.context import AppContext, get_context, get_db_session
from usersvc.core.exceptions import ErrorKind, ServiceError

from .db import api as db_api
from .schema import Message, User, UserCreated, UserIn

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])
page_router = APIRouter(tags=["Pages"])

# Bounds of the int4 id column
UserId = Annotated[int, Path(ge=1, le=2**31 - 1)]


def _database_error(action: str, error: SQLAlchemyError) -> ServiceError:
	return ServiceError(ErrorKind.DATABASE, f"Failed to {action}: {error}")


@router.get("", response_model=list[User])
async def list_users(
	session: Annotated[AsyncSession, Depends(get_db_session)],
):
	"""List all users."""
	try:
		rows = await db_api.list_users(session)
	except SQLAlchemyError as e:
		raise _database_error("list users", e) from e

	return [User.model_validate(row) for row in rows]


@router.post("", response_model=UserCreated)
async def create_user(
	data: UserIn,
	session: Annotated[AsyncSession, Depends(get_db_session)],
):
	"""Create a user and return its id."""
	try:
		user_id = await db_api.create_user(
			session,
			name=data.name,
			department=data.department,
			email=data.email,
		)
	except SQLAlchemyError as e:
		raise _database_error("insert user into database", e) from e

	logger.info(f"Created user {user_id}")
	return UserCreated(id=user_id)


@router.put("/{user_id}", response_model=Message)
async def update_user(
	user_id: UserId,
	data: UserIn,
	session: Annotated[AsyncSession, Depends(get_db_session)],
):
	"""Overwrite a user. Succeeds even when no user has this id."""
	try:
		count = await db_api.update_user(
			session,
			user_id,
			name=data.name,
			department=data.department,
			email=data.email,
		)
	except SQLAlchemyError as e:
		raise _database_error(f"update user {user_id}", e) from e

	if count == 0:
		logger.warning(f"Update of user {user_id} matched no rows")
	return Message(message="User updated")


@router.delete("/{user_id}", response_model=Message)
async def delete_user(
	user_id: UserId,
	session: Annotated[AsyncSession, Depends(get_db_session)],
):
	"""Delete a user. Succeeds even when no user has this id."""
	try:
		count = await db_api.delete_user(session, user_id)
	except SQLAlchemyError as e:
		raise _database_error(f"delete user {user_id}", e) from e

	if count == 0:
		logger.warning(f"Delete of user {user_id} matched no rows")
	return Message(message="User deleted")


@page_router.get("/", response_class=HTMLResponse)
async def index(
	request: Request,
	context: Annotated[AppContext, Depends(get_context)],
	session: Annotated[AsyncSession, Depends(get_db_session)],
):
	"""Render the users listing page; on failure the page shows an error."""
	try:
		rows = await db_api.list_users(session)
	except SQLAlchemyError as e:
		logger.error(f"Failed to list users for index page: {e}")
		return context.templates.TemplateResponse(
			request,
			"index.html",
			{"error": ErrorKind.DATABASE.message},
			status_code=ErrorKind.DATABASE.status_code,
		)

	return context.templates.TemplateResponse(
		request,
		"index.html",
		{"users": [User.model_validate(row) for row in rows]},
	)
