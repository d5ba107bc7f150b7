# (c) Copyright Datacraft, 2026
"""User schemas."""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
	"""User as listed by ``GET /users``."""
	id: int
	name: str
	department: str
	email: str

	model_config = ConfigDict(from_attributes=True)


class UserIn(BaseModel):
	"""
	Body of create and update requests.

	Absent fields bind to the empty string; values that are not strings are
	rejected.
	"""
	name: str = ""
	department: str = ""
	email: str = ""


class UserCreated(BaseModel):
	id: int


class Message(BaseModel):
	message: str
