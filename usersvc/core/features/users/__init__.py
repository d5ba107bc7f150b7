# (c) Copyright Datacraft, 2026
"""Users feature: CRUD over the users table plus an HTML listing."""

from .schema import (
	User,
	UserIn,
	UserCreated,
	Message,
)

__all__ = [
	"User",
	"UserIn",
	"UserCreated",
	"Message",
]
