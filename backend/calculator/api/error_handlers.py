"""Error Handlers — global exception handlers for the calculator API.

Invariants:
    - CalculatorError → structured JSON with error code, message, severity
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CalculatorError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from calculator.core.errors import CalculatorError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_calculator_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_calculator_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        """Handle all calculator domain errors."""
        logger.warning(
            f"CalculatorError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        calculator_id = request.path_params.get("calculator_id")
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={
                "calculator_id": calculator_id,
                "error_code": "VALIDATION_ERROR",
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc, calculator_id),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(
    exc: RequestValidationError, calculator_id: str | None,
) -> dict:
    """Field-level details, tagged with the calculator the request targeted."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "context": {"calculator_id": calculator_id},
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
