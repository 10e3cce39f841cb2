"""
Request timing middleware

Tags each request with a short request id and logs how long it took.
"""

import time
import uuid
import logging
import traceback
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from ..utils.debug_logger import debug_logger

logger = logging.getLogger(__name__)


class TimingMiddleware(BaseHTTPMiddleware):
    """Middleware to capture request timing and log total request duration"""

    async def dispatch(self, request: Request, call_next):
        request.state.start_time = time.perf_counter()
        request.state.request_id = str(uuid.uuid4())[:8]
        request_id = request.state.request_id

        debug_logger.log_route(request_id, f"Request started: {request.method} {request.url.path}", request)
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled exception for {request.url.path}: {e}")
            logger.error(f"Traceback: {traceback.format_exc()}")
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error", "path": str(request.url.path)}
            )

        total_time_ms = (time.perf_counter() - request.state.start_time) * 1000
        debug_logger.log_timing(
            request_id,
            f"{request.method} {request.url.path} -> {response.status_code}",
            total_time_ms,
        )
        return response
