from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from expense_api.core.exceptions import ApplicationError, ValidationFailedError
from expense_api.core.logger import logger


def error_timestamp(now: Optional[datetime] = None) -> str:
    """Local wall-clock instant as ``YYYY-MM-DDTHH:MM:SS.mmm`` (no offset)."""
    return (now or datetime.now()).isoformat(timespec="milliseconds")


def build_error_body(
    request: Request,
    message: str,
    error_code: str,
    errors: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "timestamp": error_timestamp(),
        "message": message,
        "details": f"uri={request.url.path}",
        "errorCode": error_code,
    }
    if errors:
        body["errors"] = errors
    return body


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    errors = None
    if isinstance(exc, ValidationFailedError):
        errors = [{"field": e.field, "message": e.message} for e in exc.errors]

    if exc.status_code >= 500:
        logger.error("[ErrorHandler] %s %s -> %s", request.method, request.url.path, exc, exc_info=exc)
    else:
        logger.info(
            "[ErrorHandler] %s %s -> %s %s",
            request.method, request.url.path, exc.status_code, exc.message,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_body(request, exc.message, exc.error_code, errors),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"),
            "message": err.get("msg", "invalid value"),
        }
        for err in exc.errors()
    ]
    logger.warning("[ErrorHandler] %s %s malformed request: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=build_error_body(request, "Malformed request", "MALFORMED_REQUEST", errors),
    )


HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "RESOURCE_NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        code = "INTERNAL_SERVER_ERROR"
    else:
        code = HTTP_ERROR_CODES.get(exc.status_code, "BAD_REQUEST")
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_body(request, str(exc.detail), code),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "[ErrorHandler] %s %s unhandled: %s", request.method, request.url.path, exc, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=build_error_body(request, str(exc) or exc.__class__.__name__, "INTERNAL_SERVER_ERROR"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
