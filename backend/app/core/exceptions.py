"""
Error Taxonomy & JSON Error Envelopes
"""
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging import logger


class JobPortalError(Exception):
    """Base class for application errors"""


class JobValidationError(JobPortalError):
    """Missing or malformed client input"""

    def __init__(
        self,
        message: str,
        missing_fields: Optional[List[str]] = None,
        details: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.missing_fields = missing_fields or []
        self.details = details or {}


class InvalidIdentifierError(JobPortalError):
    """Identifier is not a well-formed job ID"""

    def __init__(self, raw_id: str):
        super().__init__(f"Invalid job ID format: {raw_id!r}")
        self.raw_id = raw_id


class PersistenceError(JobPortalError):
    """Store unreachable or write rejected"""


class APIError(JobPortalError):
    """HTTP failure already shaped by a handler"""

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Optional[str] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error
        self.details = details


def error_body(message: str, error: Optional[str] = None, details: Any = None, **extra) -> Dict[str, Any]:
    """Build the {success: false, ...} envelope"""
    body: Dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    if details is not None:
        body["details"] = details
    body.update(extra)
    return body


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.error, exc.details),
    )


async def validation_error_handler(request: Request, exc: JobValidationError) -> JSONResponse:
    extra = {}
    if exc.missing_fields:
        extra["missingFields"] = exc.missing_fields
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(exc.message, details=exc.details or None, **extra),
    )


async def invalid_identifier_handler(request: Request, exc: InvalidIdentifierError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid job ID format"),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request body", details=details),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal Server Error", error=str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope renderers to the app"""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(JobValidationError, validation_error_handler)
    app.add_exception_handler(InvalidIdentifierError, invalid_identifier_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
