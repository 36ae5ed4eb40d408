"""
FastAPI middleware for request context, logging and session refresh
"""
import re
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware

from cms_admin.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

# Paths the session refresh never sees: static assets, favicon, manifest,
# health probe, API routes and image/stylesheet files.
EXCLUDED_PATH_PATTERN = re.compile(
    r"^/(?:static/|favicon\.ico$|manifest\.webmanifest$|health(?:/|$)|api(?:/|$))"
    r"|\.(?:svg|png|jpg|jpeg|gif|webp|css)$"
)


def should_refresh_session(path: str) -> bool:
    """Path matcher for SessionMiddleware"""
    return EXCLUDED_PATH_PATTERN.search(path) is None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to add request context to logs"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Add request context and log request/response"""
        request_id = str(uuid.uuid4())

        LoggingConfig.set_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
        )

        start_time = time.time()
        logger.debug(
            "Request started",
            extra={"query_params": str(request.query_params)},
        )

        try:
            response = await call_next(request)

            duration_ms = int((time.time() - start_time) * 1000)
            logger.info(
                "Request completed",
                extra={"status_code": response.status_code, "duration_ms": duration_ms},
            )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            duration_ms = int((time.time() - start_time) * 1000)
            logger.error(
                "Request failed",
                exc_info=True,
                extra={
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "duration_ms": duration_ms,
                }
            )
            raise

        finally:
            LoggingConfig.clear_context()


class SessionMiddleware(BaseHTTPMiddleware):
    """
    Refreshes the auth session before routing.

    All session logic belongs to the auth provider installed on
    ``app.state.auth_provider``; this layer only logs the URL, hands the
    request over and applies the resulting cookies.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not should_refresh_session(request.url.path):
            return await call_next(request)

        logger.info(f"Request URL: {request.url}")

        provider = request.app.state.auth_provider
        refresh = await run_in_threadpool(provider.refresh_session, request)

        if refresh.response is not None:
            response = refresh.response
        else:
            response = await call_next(request)

        provider.apply_cookies(refresh, response)
        return response
