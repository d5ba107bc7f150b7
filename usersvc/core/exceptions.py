# (c) Copyright Datacraft, 2026
"""Error kinds and their mapping to HTTP responses."""
import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
	"""Kinds of failures a request can end in."""
	INVALID_REQUEST = "invalid_request"
	DATABASE = "database"
	UNAVAILABLE = "unavailable"

	@property
	def status_code(self) -> int:
		return _STATUS_CODES[self]

	@property
	def message(self) -> str:
		return _MESSAGES[self]


_STATUS_CODES = {
	ErrorKind.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
	ErrorKind.DATABASE: status.HTTP_500_INTERNAL_SERVER_ERROR,
	ErrorKind.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

_MESSAGES = {
	ErrorKind.INVALID_REQUEST: "Invalid request",
	ErrorKind.DATABASE: "Database error",
	ErrorKind.UNAVAILABLE: "Database unavailable",
}


class ServiceError(Exception):
	"""Failure of a given kind; ``detail`` is for logs only."""

	def __init__(self, kind: ErrorKind, detail: str | None = None):
		self.kind = kind
		self.detail = detail
		super().__init__(detail or kind.message)


def error_response(kind: ErrorKind) -> JSONResponse:
	return JSONResponse(
		status_code=kind.status_code,
		content={"error": kind.message},
	)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
	logger.error(f"{request.method} {request.url.path} failed ({exc.kind.value}): {exc}")
	return error_response(exc.kind)


async def validation_error_handler(
	request: Request,
	exc: RequestValidationError,
) -> JSONResponse:
	logger.info(f"{request.method} {request.url.path} rejected: {exc.errors()}")
	return error_response(ErrorKind.INVALID_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
	app.add_exception_handler(ServiceError, service_error_handler)
	app.add_exception_handler(RequestValidationError, validation_error_handler)
