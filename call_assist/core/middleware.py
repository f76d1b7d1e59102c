"""
FastAPI middleware for correlation ID propagation and request logging.
"""
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from call_assist.core.logging import (
    get_logger,
    correlation_context,
    log_business_event,
    log_error_with_context,
)

logger = get_logger(__name__)


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Middleware to add correlation ID to requests and responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and add correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())[:8]
        agent_id = request.headers.get("X-Agent-ID")

        with correlation_context(correlation_id=correlation_id, agent_id=agent_id):
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
            )

            start_time = time.time()

            try:
                response = await call_next(request)
            except Exception as e:
                processing_time_ms = round((time.time() - start_time) * 1000, 2)
                log_error_with_context(
                    logger,
                    e,
                    {
                        "method": request.method,
                        "path": request.url.path,
                        "processing_time_ms": processing_time_ms,
                    },
                )
                raise

            processing_time_ms = round((time.time() - start_time) * 1000, 2)

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                processing_time_ms=processing_time_ms,
            )

            response.headers["X-Correlation-ID"] = correlation_id
            if response.status_code == 200:
                response.headers["X-Processing-Time-MS"] = str(processing_time_ms)

            log_business_event(
                "http_request_completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                processing_time_ms=processing_time_ms,
            )

            return response
