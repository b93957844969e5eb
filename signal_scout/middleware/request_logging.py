"""Request logging middleware for structured logging."""

import logging
import time
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from signal_scout.utils.logging import reset_request_id, set_request_id

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assign a request id, log start and completion, echo the id back."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid4())
        request.state.request_id = request_id
        token = set_request_id(request_id)

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"
        start_time = time.time()

        try:
            logger.info(
                f"{method} {path}",
                extra={
                    "endpoint": path,
                    "method": method,
                    "client_ip": client_ip,
                    "user_agent": request.headers.get("user-agent", "unknown"),
                },
            )
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"{method} {path} ERROR: {e}",
                    extra={
                        "endpoint": path,
                        "method": method,
                        "status_code": 500,
                        "duration_ms": round((time.time() - start_time) * 1000, 2),
                    },
                    exc_info=True,
                )
                raise

            status_code = response.status_code
            logger.log(
                logging.INFO if status_code < 400 else logging.WARNING,
                f"{method} {path} {status_code}",
                extra={
                    "endpoint": path,
                    "method": method,
                    "status_code": status_code,
                    "duration_ms": round((time.time() - start_time) * 1000, 2),
                },
            )
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            reset_request_id(token)
