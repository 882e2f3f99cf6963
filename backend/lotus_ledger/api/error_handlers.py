"""Error Handlers: translate every escaping exception into a LedgerError response.

Invariants:
    - The response body is always LedgerError.to_response(); no envelope is
      assembled here
    - RequestValidationError becomes RequestValidationFailed (400)
    - Anything outside the hierarchy becomes UnexpectedError (500) and only
      the log record carries the original exception

Design Decisions:
    - 5xx logged at ERROR, 4xx at INFO: client mistakes are not incidents
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from lotus_ledger.core.errors import (
    LedgerError, RequestValidationFailed, UnexpectedError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(LedgerError, _handle_ledger_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def error_response(
    request: Request, exc: LedgerError, cause: Exception | None = None,
) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.info
    log(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "operation": exc.context.operation,
        },
        exc_info=cause,
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_ledger_error(request: Request, exc: LedgerError):
    return error_response(request, exc)


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return error_response(request, RequestValidationFailed(details))


async def _handle_unexpected_error(request: Request, exc: Exception):
    return error_response(request, UnexpectedError(), cause=exc)
