"""Error-mapping middleware and payload-validation handler.

Service errors become ``{success: false, message, statusCode}`` envelopes with
the status code of their kind; anything else is logged with its traceback and
answered with a generic 500 so internals never reach the caller.
"""
import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from request_manager.exceptions import ServiceError
from request_manager.schemas.common import ErrorEnvelope

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(status_code: int, message: str, errors: list[str] | None = None) -> JSONResponse:
    envelope = ErrorEnvelope(message=message, status_code=status_code, errors=errors)
    return JSONResponse(status_code=status_code, content=envelope.to_content())


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except ServiceError as exc:
            logger.warning(
                "%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message
            )
            return error_response(exc.status_code, exc.message)
        except Exception:
            logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE)


def _format_validation_error(error: dict) -> str:
    field = ".".join(str(part) for part in error["loc"] if part != "body")
    message = error["msg"].removeprefix("Value error, ")
    return f"{field}: {message}" if field else message


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures (length, enum, range, missing fields) give 400 with every message."""
    errors = [_format_validation_error(error) for error in exc.errors()]
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, errors)
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)
