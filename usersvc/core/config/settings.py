# (c) Copyright Datacraft, 2026
"""Application settings configuration."""
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
	# Database connection, no defaults
	db_host: str
	db_user: str
	db_password: SecretStr
	db_name: str
	db_port: int = Field(gt=0, default=5432)
	# Connect to DB via SSL
	db_ssl: bool = True

	# Listener
	host: str = '0.0.0.0'
	port: int = Field(gt=0, default=8080)

	# Logging
	log_config: Path | None = None
	log_level: str = 'INFO'

	# Not a computed field: must stay out of repr and model_dump
	@property
	def db_url(self) -> URL:
		return URL.create(
			"postgresql+asyncpg",
			username=self.db_user,
			password=self.db_password.get_secret_value(),
			host=self.db_host,
			port=self.db_port,
			database=self.db_name,
		)

	model_config = SettingsConfigDict(
		env_file='.env',
		env_file_encoding='utf-8',
		extra='ignore',
	)


_settings: Settings | None = None


def get_settings() -> Settings:
	global _settings
	if _settings is None:
		_settings = Settings()
	return _settings
