# (c) Copyright Datacraft, 2026
"""Users ORM models."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from usersvc.core.db.base import Base


class User(Base):
	"""Mapping of the existing ``users`` table; the schema is managed elsewhere."""
	__tablename__ = "users"

	id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
	name: Mapped[str] = mapped_column(Text, nullable=False)
	department: Mapped[str] = mapped_column(Text, nullable=False)
	email: Mapped[str] = mapped_column(Text, nullable=False)

	def __repr__(self) -> str:
		return f"User(id={self.id}, name={self.name!r})"
