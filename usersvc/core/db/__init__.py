# (c) Copyright Datacraft, 2026
from .base import Base
from .engine import Database

__all__ = [
	"Base",
	"Database",
]
