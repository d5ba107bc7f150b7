# (c) Copyright Datacraft, 2026
"""Users database models and operations."""

from .orm import User

__all__ = [
	"User",
]
