"""Logging middleware for FastAPI."""

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from designkit.infrastructure.logging.logger import get_logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """Assigns a request id and logs every HTTP request and response."""

    def __init__(self, app, log_requests: bool = True, log_responses: bool = True):
        """
        Initialize logging middleware.

        Args:
            app: FastAPI application
            log_requests: Whether to log requests
            log_responses: Whether to log responses
        """
        super().__init__(app)
        self.log_requests = log_requests
        self.log_responses = log_responses
        self.logger = get_logger(__name__)

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()
        if self.log_requests:
            client_ip = request.client.host if request.client else "unknown"
            self.logger.info(
                "HTTP request", request_id=request_id, method=request.method,
                path=request.url.path, client_ip=client_ip,
            )

        try:
            response = await call_next(request)
        except Exception as e:
            self.logger.error(
                "HTTP request failed", request_id=request_id, method=request.method,
                path=request.url.path, error=f"{type(e).__name__}: {e}",
                duration=round(time.time() - start_time, 3),
            )
            raise

        if self.log_responses:
            self._log_response(request, response, request_id, time.time() - start_time)
        response.headers["X-Request-ID"] = request_id
        return response

    def _log_response(self, request: Request, response: Response, request_id: str, duration: float):
        self.logger.info(
            "HTTP response", request_id=request_id, status_code=response.status_code,
            method=request.method, path=request.url.path, duration=round(duration, 3),
        )
