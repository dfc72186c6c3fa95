"""
Error handling for the API.

Every error response carries:
- error_code: machine-readable identifier
- message: human-readable description
- hint: suggested recovery action
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from aqualedger.application.dto.responses import ErrorResponse
from aqualedger.config import get_logger
from aqualedger.core.exceptions import (
    AquaLedgerError,
    ConfigurationError,
    PeriodAlreadyClosedError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)

logger = get_logger(__name__)


# Map exceptions to HTTP status codes (first match wins)
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    RecordNotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    PeriodAlreadyClosedError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ValueError: status.HTTP_400_BAD_REQUEST,
}

HINT_MAP: dict[str, str] = {
    "CUSTOMER_NOT_FOUND": "Check the customer ID and try GET /api/customers to list customers.",
    "SALE_NOT_FOUND": "Check the sale ID and try GET /api/sales to list sales for a day.",
    "INVENTORY_ITEM_NOT_FOUND": "Check the item ID and try GET /api/inventory to list items.",
    "SALESMAN_NOT_FOUND": "Check the salesman ID and try GET /api/salesmen to list salesmen.",
    "PERIOD_ALREADY_CLOSED": "The month is closed. Use GET /api/cash/periods/{period} to view it.",
    "VALIDATION_ERROR": "Check the request body against the API schema.",
    "DATABASE_ERROR": "A database operation failed. Check server logs.",
    "CONFIGURATION_ERROR": "Check the LEDGER_, STORAGE_ and API_ environment settings.",
}

STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    404: "The requested resource was not found. Verify the ID.",
    409: "The request conflicts with the current ledger state.",
    422: "The request could not be processed. Check the input format.",
    500: "An internal error occurred. Check server logs.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def _status_for(exc: Exception) -> int:
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(request: Request, exc: Exception) -> JSONResponse:
    """Convert an exception to the standard JSON error body."""
    status_code = _status_for(exc)
    error_code = exc.code if isinstance(exc, AquaLedgerError) else exc.__class__.__name__
    message = exc.message if isinstance(exc, AquaLedgerError) else str(exc)

    log = logger.error if status_code >= 500 else logger.warning
    log(
        "request_error",
        request_id=getattr(request.state, "request_id", None),
        path=request.url.path,
        error_code=error_code,
        error=message,
        traceback=traceback.format_exc() if status_code >= 500 else None,
    )

    body = ErrorResponse(
        error_code=error_code,
        message=message,
        hint=_get_hint(error_code, status_code),
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turns exceptions that escape the route handlers into JSON error responses."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return error_response(request, e)


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up FastAPI exception handlers."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(AquaLedgerError)
    async def domain_exception_handler(
        request: Request,
        exc: AquaLedgerError,
    ) -> JSONResponse:
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
                hint=HINT_MAP["VALIDATION_ERROR"],
                detail="; ".join(errors),
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        error_code = {404: "NOT_FOUND", 400: "BAD_REQUEST", 405: "METHOD_NOT_ALLOWED"}.get(
            exc.status_code, "HTTP_ERROR"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error_code=error_code,
                message=exc.detail or "An error occurred",
                hint=_get_hint(error_code, exc.status_code),
                path=request.url.path,
            ).model_dump(mode="json"),
        )
