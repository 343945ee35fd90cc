"""
Error types and the app-level exception handlers.

Validation problems are answered as 400 {"error": ...}; upstream failures
from the SpaceX proxy keep the upstream status, while transport errors and
malformed payloads become 502.
"""

import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class UpstreamShapeError(Exception):
    """Upstream JSON is not the object (or array) a DTO is projected from."""

    def __init__(self, dto: str, received: str) -> None:
        self.dto = dto
        self.received = received
        super().__init__(f"[{dto}] unexpected upstream JSON type: {received}")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "Invalid request")
    return error_response(400, f"{loc}: {message}" if loc else message)


async def _upstream_status(request: Request, exc: httpx.HTTPStatusError) -> JSONResponse:
    status = exc.response.status_code
    logger.warning("Upstream %s answered %s", exc.request.url, status)
    return error_response(status, f"Upstream responded with {status}")


async def _upstream_transport(request: Request, exc: httpx.TransportError) -> JSONResponse:
    logger.warning("Upstream unreachable: %s", exc)
    return error_response(502, "Upstream unavailable")


async def _upstream_shape(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Unexpected upstream payload: %s", exc)
    return error_response(502, "Unexpected upstream response")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(httpx.HTTPStatusError, _upstream_status)
    app.add_exception_handler(httpx.TransportError, _upstream_transport)
    app.add_exception_handler(UpstreamShapeError, _upstream_shape)
    app.add_exception_handler(ValidationError, _upstream_shape)
