"""Uniform JSON error bodies: {"error": CODE, "message": text}."""
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from feast.infra.supabase_client import SupabaseError

logger = logging.getLogger(__name__)

_CODE_BY_STATUS = {
    400: "VALIDATION_ERROR",
    403: "UNAUTHORIZED",
    404: "NOT_FOUND",
    500: "SERVER_ERROR",
}


def api_error(status_code: int, message: str, code: str = None) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"error": code or _CODE_BY_STATUS.get(status_code, "ERROR"), "message": message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": _CODE_BY_STATUS.get(exc.status_code, "ERROR"), "message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        message = str(first.get("msg", message)).removeprefix("Value error, ")
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        if field and first.get("type") != "value_error":
            message = f"{field}: {message}"
    return JSONResponse(status_code=400, content={"error": "VALIDATION_ERROR", "message": message})


async def supabase_exception_handler(request: Request, exc: SupabaseError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content={"error": "DATABASE_ERROR", "message": exc.message})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SupabaseError, supabase_exception_handler)
