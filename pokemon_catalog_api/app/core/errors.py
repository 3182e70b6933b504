"""
Exception handlers shaping every error response.

All error bodies share one shape::

    {"message": <str or list of str>, "error": <reason phrase>, "statusCode": <int>}

Single failures (e.g. not found) carry a string ``message``; validation
failures carry the ordered list of violated rules.
"""

import logging
from http import HTTPStatus
from typing import Any, Dict, List, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import RequestValidationFailed

logger = logging.getLogger(__name__)

# Route parameter names shown to clients under their public name.
PUBLIC_FIELD_NAMES = {"pokemon_id": "id"}


def error_body(status_code: int, message: Union[str, List[str]]) -> Dict[str, Any]:
    """Build the error payload for ``status_code``."""
    return {
        "message": message,
        "error": HTTPStatus(status_code).phrase,
        "statusCode": status_code,
    }


def describe_parameter_error(err: Dict[str, Any]) -> str:
    """Turn one pydantic error entry into a readable rule violation."""
    loc = [part for part in err.get("loc", ()) if part not in ("query", "path", "body")]
    field = str(loc[-1]) if loc else "request"
    field = PUBLIC_FIELD_NAMES.get(field, field)
    err_type = err.get("type", "")
    ctx = err.get("ctx") or {}
    if err_type == "json_invalid":
        return "request body must be valid JSON"
    if err_type in ("int_parsing", "int_type", "int_from_float"):
        return f"{field} must be an integer number"
    if err_type == "greater_than_equal":
        return f"{field} must not be less than {ctx.get('ge')}"
    if err_type == "less_than_equal":
        return f"{field} must not be greater than {ctx.get('le')}"
    if err_type == "missing":
        return f"{field} should not be empty"
    return f"{field} {err.get('msg', 'is invalid')}"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_failed_handler(request: Request, exc: RequestValidationFailed) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(status.HTTP_400_BAD_REQUEST, exc.messages),
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [describe_parameter_error(err) for err in exc.errors()]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, "; ".join(messages))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(status.HTTP_400_BAD_REQUEST, messages),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the catalog's exception handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationFailed, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
