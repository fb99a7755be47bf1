"""
Standardized response helpers for consistent API responses.

Error bodies always look like::

    {"success": false, "kind": "not_found", "message": "...", "errors": []}
"""

from typing import Any
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import InterfaceError, OperationalError

from portfolio.core.errors import PortfolioError, StoreUnavailable

logger = logging.getLogger(__name__)


class APIResponse(BaseModel):
    """Standard API response model"""

    success: bool
    message: str
    data: Any | None = None


class APIErrorResponse(BaseModel):
    success: bool = False
    kind: str
    message: str
    errors: list[str] = []


def success_response(
    message: str = "Success",
    data: Any = None,
) -> APIResponse:
    """Create a successful response"""
    return APIResponse(success=True, message=message, data=data)


def error_json(
    kind: str,
    message: str,
    status_code: int,
    errors: list[str] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = APIErrorResponse(kind=kind, message=message, errors=errors or [])
    return JSONResponse(
        status_code=status_code, content=body.model_dump(), headers=headers
    )


def _field_name(loc: tuple) -> str:
    # drop the "body" / "path" / "query" prefix FastAPI adds
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def portfolio_error_handler(request: Request, exc: PortfolioError):
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return error_json(exc.kind, exc.message, exc.status_code, exc.errors, headers)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [f"{_field_name(tuple(e['loc']))}: {e['msg']}" for e in exc.errors()]
    return error_json(
        "validation_error",
        "Validation failed",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        errors,
    )


async def store_error_handler(request: Request, exc: Exception):
    """Connection-level driver failures. The driver message stays in the log."""
    logger.exception(
        "Database connection error on %s %s", request.method, request.url.path
    )
    return error_json(
        StoreUnavailable.kind,
        StoreUnavailable.default_message,
        StoreUnavailable.status_code,
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_json(
        "internal_error",
        "Internal server error",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PortfolioError, portfolio_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(OperationalError, store_error_handler)
    app.add_exception_handler(InterfaceError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
