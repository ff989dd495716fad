"""Exception handlers mapping errors to the structured error body."""

from datetime import datetime, timezone
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from credit_service.core.metrics import record_business_error
from credit_service.domain.exceptions import (
    BusinessException,
    DomainException,
    FieldViolation,
    ValidationException,
)
from credit_service.presentation.schemas import ErrorDetailSchema, ErrorResponseSchema
from .request_context import REQUEST_ID_HEADER, get_request_id

logger = structlog.get_logger(__name__)

BAD_REQUEST_TITLE = "Bad Request! Consult the documentation"
INTERNAL_ERROR_TITLE = "Internal Server Error"

# Location prefixes FastAPI adds to request validation errors
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def classify(exc_type: type) -> str:
    """
    Fully-qualified classification of an error.

    Domain errors are reported by category so clients can rely on a
    stable value; anything else is reported by its own class.
    """
    for category in (BusinessException, ValidationException):
        if issubclass(exc_type, category):
            return f"{category.__module__}.{category.__qualname__}"
    return f"{exc_type.__module__}.{exc_type.__qualname__}"


def _error_response(
    request: Request,
    status: int,
    title: str,
    exception: str,
    violations: Iterable[FieldViolation],
) -> JSONResponse:
    request_id = get_request_id(request)
    body = ErrorResponseSchema(
        title=title,
        timestamp=datetime.now(timezone.utc),
        status=status,
        exception=exception,
        details=[
            ErrorDetailSchema(field=v.field, message=v.message) for v in violations
        ],
        request_id=request_id,
    )
    headers = {REQUEST_ID_HEADER: request_id} if request_id else None
    return JSONResponse(
        status_code=status, content=body.model_dump(mode="json"), headers=headers
    )


def _violations_from_request_error(exc: RequestValidationError) -> list[FieldViolation]:
    violations = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        violations.append(
            FieldViolation(field=".".join(loc) or "body", message=error.get("msg", ""))
        )
    return violations


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Every client error is answered with 400 and the structured error body.
    """

    @app.exception_handler(BusinessException)
    async def business_exception_handler(
        request: Request,
        exc: BusinessException,
    ) -> JSONResponse:
        """Handle business rule violations."""
        logger.warning(
            "business_exception",
            request_id=get_request_id(request),
            code=exc.code,
            message=exc.message,
        )
        record_business_error(exc.code)
        return _error_response(
            request, 400, BAD_REQUEST_TITLE, classify(type(exc)), exc.violations
        )

    @app.exception_handler(ValidationException)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationException,
    ) -> JSONResponse:
        """Handle field validation failures raised by the services."""
        logger.info(
            "validation_failed",
            request_id=get_request_id(request),
            fields=[v.field for v in exc.violations],
        )
        return _error_response(
            request, 400, BAD_REQUEST_TITLE, classify(type(exc)), exc.violations
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed or incomplete requests."""
        violations = _violations_from_request_error(exc)
        logger.info(
            "request_rejected",
            request_id=get_request_id(request),
            fields=[v.field for v in violations],
        )
        return _error_response(
            request, 400, BAD_REQUEST_TITLE, classify(ValidationException), violations
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(request),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(
            request,
            400,
            BAD_REQUEST_TITLE,
            classify(type(exc)),
            [FieldViolation(field="", message=exc.message)],
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(request),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(
            request,
            500,
            INTERNAL_ERROR_TITLE,
            classify(type(exc)),
            [FieldViolation(field="", message="An unexpected error occurred.")],
        )
