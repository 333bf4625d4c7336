"""
Consolidated middleware and exception handlers for the Daily Diet API
"""

import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.dependencies import get_session_token
from api.responses import error_body
from app.config import settings
from app.exceptions import AppError, UnauthorizedError
from domain.schemas.validation import first_error_message

logger = logging.getLogger("dailydiet.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def summarize_errors(errors) -> list:
    """Keep the JSON-safe part of pydantic error dicts"""
    return [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": str(err.get("msg", "")),
            "type": str(err.get("type", "")),
        }
        for err in errors
    ]


def _depends_on(dependant, call) -> bool:
    return any(
        sub.call is call or _depends_on(sub, call) for sub in dependant.dependencies
    )


def route_requires_session(request: Request) -> bool:
    """Whether the matched route is guarded by the session cookie"""
    endpoint = request.scope.get("endpoint")
    if endpoint is None:
        return False
    for route in request.app.routes:
        if isinstance(route, APIRoute) and route.endpoint is endpoint:
            return _depends_on(route.dependant, get_session_token)
    return False


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
            },
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report the first violated field of a request body as a 400"""
    # Malformed JSON is rejected before the session dependency runs
    if route_requires_session(request) and not request.cookies.get(
        settings.session_cookie_name
    ):
        return await app_exception_handler(request, UnauthorizedError("Unauthorized"))

    errors = exc.errors()
    message = first_error_message(errors)
    logger.warning(f"Validation error on {request.url}: {message}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", message, summarize_errors(errors)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(f"HTTP_{exc.status_code}", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def app_exception_handler(request: Request, exc: AppError):
    """Handle errors raised by services and dependencies"""
    logger.warning(f"{type(exc).__name__} on {request.url}: {exc.message}")

    code = exc.code or exc.error_code
    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(code, exc.message, exc.details),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )
