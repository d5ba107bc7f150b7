# (c) Copyright Datacraft, 2026
"""ASGI entry point for external servers, e.g. ``uvicorn usersvc.asgi:app``."""
from usersvc.app import create_app
from usersvc.core.config import configure_logging, get_settings

configure_logging(get_settings())

app = create_app(get_settings())
