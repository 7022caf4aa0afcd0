"""
API Middleware - Request/response processing.

Provides:
- Request ID tracking
- Response latency measurement
- Error handling with taxonomy codes
- Request body validation mapped onto the missing-fields error
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from booleansearch.config.errors import (
    MSG_MISSING_FIELDS,
    MSG_UNEXPECTED,
    BooleanSearchError,
    ErrorCode,
    error_code_to_status,
)

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach request ID for tracing across logs and responses."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        # Store in request state for access in handlers
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response


class LatencyMiddleware(BaseHTTPMiddleware):
    """Track and log request latency."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.2f}"

        request_id = getattr(request.state, "request_id", "unknown")
        logger.info(
            "%s %s status=%d latency_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )

        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Convert exceptions to the search response envelope."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except BooleanSearchError as e:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.error(
                "BooleanSearchError: %s request_id=%s details=%s",
                e.message,
                request_id,
                e.details,
            )
            return JSONResponse(
                status_code=error_code_to_status(e.code),
                content=error_envelope(e.message, e.code, request_id),
            )
        except Exception as e:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.exception("Unhandled error: %s request_id=%s", str(e), request_id)
            return JSONResponse(
                status_code=500,
                content=error_envelope(
                    MSG_UNEXPECTED.format(message=e),
                    ErrorCode.INTERNAL_ERROR,
                    request_id,
                ),
            )


def error_envelope(message: str, code: ErrorCode, request_id: str) -> dict[str, Any]:
    """Search response envelope carrying an error."""
    return {
        "url": "",
        "title": "",
        "description": "",
        "error": message,
        "code": code.value,
        "request_id": request_id,
    }


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer absent, malformed or mistyped bodies like blank fields."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.warning("Invalid request body: %s request_id=%s", exc.errors(), request_id)
    return JSONResponse(
        status_code=error_code_to_status(ErrorCode.VALIDATION_ERROR),
        content=error_envelope(MSG_MISSING_FIELDS, ErrorCode.VALIDATION_ERROR, request_id),
    )
