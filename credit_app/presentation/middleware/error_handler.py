"""Error handling middleware and exception handlers."""

from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from credit_app.domain.exceptions import (
    BusinessException,
    CreditOwnershipException,
    DataIntegrityException,
    DomainException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

TITLE_BAD_REQUEST = "Bad Request! Consult the documentation"
TITLE_CONFLICT = "Conflict! Consult the documentation"
TITLE_INTERNAL_ERROR = "Internal Server Error! Consult the documentation"


def exception_name(exc: Exception) -> str:
    """Fully qualified class name of an exception, e.g. "class pkg.mod.Error"."""
    cls = type(exc)
    return f"class {cls.__module__}.{cls.__qualname__}"


def error_response(
    status_code: int,
    title: str,
    exc: Exception,
    details: list[dict],
) -> JSONResponse:
    """Build the standard error body."""
    return JSONResponse(
        status_code=status_code,
        content={
            "title": title,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": status_code,
            "exception": exception_name(exc),
            "details": details,
        },
    )


def _validation_details(exc: RequestValidationError) -> list[dict]:
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        details.append({
            "field": ".".join(loc) or None,
            "message": error.get("msg", "Invalid value"),
        })
    return details or [{"field": None, "message": "Invalid request"}]


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps request validation errors and domain exceptions to the
    standard error body.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request body/query/path validation errors."""
        details = _validation_details(exc)
        logger.info(
            "request_validation_failed",
            request_id=get_request_id(),
            fields=[d["field"] for d in details],
        )
        return error_response(400, TITLE_BAD_REQUEST, exc, details)

    @app.exception_handler(DataIntegrityException)
    async def data_integrity_handler(
        request: Request,
        exc: DataIntegrityException,
    ) -> JSONResponse:
        """Handle uniqueness and integrity violations reported by the store."""
        return error_response(
            409,
            TITLE_CONFLICT,
            exc,
            [{"field": None, "message": exc.message}],
        )

    @app.exception_handler(CreditOwnershipException)
    async def credit_ownership_handler(
        request: Request,
        exc: CreditOwnershipException,
    ) -> JSONResponse:
        """Handle a credit code requested under the wrong customer."""
        return error_response(
            400,
            TITLE_BAD_REQUEST,
            exc,
            [{"field": None, "message": exc.message}],
        )

    @app.exception_handler(BusinessException)
    async def business_exception_handler(
        request: Request,
        exc: BusinessException,
    ) -> JSONResponse:
        """Handle business rule violations, including unknown ids and codes."""
        return error_response(
            400,
            TITLE_BAD_REQUEST,
            exc,
            [{"field": None, "message": exc.message}],
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return error_response(
            400,
            TITLE_BAD_REQUEST,
            exc,
            [{"field": None, "message": exc.message}],
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        # Runs outside the request context; request_failed carries the request id
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(
            500,
            TITLE_INTERNAL_ERROR,
            exc,
            [{"field": None, "message": "An unexpected error occurred."}],
        )
