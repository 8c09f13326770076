"""Global exception handlers for the Agora API.

Every error response has the shape ``{"error": {"code", "message"}}``:

- DomainError: its own code and HTTP status, message in the caller's locale
- RequestValidationError / pydantic ValidationError: 400 VALIDATION_ERROR
  with field details
- anything else: 500 INTERNAL_ERROR without internal details
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from agora.config import Settings
from agora.domain.error import DomainError
from agora.interface.messages import Locale, render, resolve_locale
from agora.util.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all global error handlers on the FastAPI app."""

    def locale_of(request: Request) -> Locale:
        return resolve_locale(
            request.headers.get("accept-language"), settings.default_locale
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        """Handle all domain errors."""
        if exc.http_status >= 500:
            logger.error(
                "%s on %s: %s", exc.code, request.url.path, exc.message, exc_info=exc
            )
        else:
            logger.info("%s on %s", exc.code, request.url.path)
        return JSONResponse(
            status_code=exc.http_status,
            content=_error_body(
                exc.code, render(exc.message_key, locale_of(request), exc.message)
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        """Handle request body, path and query validation errors."""
        logger.warning("Validation error on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_validation_body(exc.errors(), locale_of(request)),
        )

    @app.exception_handler(PydanticValidationError)
    async def model_validation_error_handler(
        request: Request, exc: PydanticValidationError
    ):
        """Handle value objects rejecting input inside a use case."""
        logger.warning("Model validation error on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_validation_body(exc.errors(), locale_of(request)),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            "Unhandled exception on %s: %s",
            request.url.path,
            type(exc).__name__,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                "INTERNAL_ERROR",
                render("internal_error", locale_of(request), "Internal error"),
            ),
        )


def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}


def _validation_body(errors, locale: Locale) -> dict:
    body = _error_body(
        "VALIDATION_ERROR", render("validation_error", locale, "Invalid request data")
    )
    body["error"]["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]
    return body
