"""API error types and exception handlers

Every error response carries a human-readable "error" string and a
machine-readable "code".
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """
    Raised by routes to turn a failed use case Result into an HTTP response

    Args:
        error: Error from the failed Result
        status_code: HTTP status to respond with (default 400)
    """

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def _format_location(loc) -> str:
    # Drop the leading "body" segment FastAPI adds
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts)


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"code={exc.error.code} reason={exc.error.reason}"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error.message, "code": exc.error.code},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": _format_location(err.get("loc", ())), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation failed",
            "code": "VALIDATION_ERROR",
            "details": details,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
