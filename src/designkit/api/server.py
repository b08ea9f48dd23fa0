"""FastAPI server factory.

FastAPI only carries HTTP in and out; every request, whatever its method or
path, is handed to the front controller.
"""

import json
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from designkit._version import __version__
from designkit.api.front_controller import FrontController
from designkit.api.middleware import LoggingMiddleware
from designkit.api.models import Response
from designkit.config.schemas import ServerConfig
from designkit.infrastructure.logging.logger import get_logger

HTTP_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def to_json_response(response: Response) -> JSONResponse:
    """Finalize a front-controller response as an HTTP response."""
    return JSONResponse(
        status_code=response.status_code,
        content=response.body,
        headers=response.headers,
    )


def create_fastapi_app(controller: FrontController, server_config: Optional[ServerConfig] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        controller: Front controller receiving every request
        server_config: Server configuration

    Returns:
        Configured FastAPI application
    """
    server_config = server_config or ServerConfig()
    app = FastAPI(
        title="designkit",
        description="Design pattern demonstrations behind a single front controller",
        version=__version__,
        docs_url="/docs" if server_config.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if server_config.docs_enabled else None,
    )

    logger = get_logger(__name__)
    app.add_middleware(LoggingMiddleware)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for all unhandled exceptions."""
        logger.error("Unhandled exception", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": {"code": "INTERNAL_ERROR", "message": "An internal server error occurred"},
                "request_id": getattr(request.state, "request_id", "unknown"),
            },
        )

    @app.api_route("/{full_path:path}", methods=HTTP_METHODS, include_in_schema=False)
    async def front_controller_entry(full_path: str, request: Request):
        raw_body = await request.body()
        body = None
        if raw_body:
            try:
                body = json.loads(raw_body)
            except json.JSONDecodeError:
                return JSONResponse(
                    status_code=400,
                    content={"success": False, "error": {"code": "INVALID_JSON", "message": "Body is not valid JSON"}},
                )

        headers = dict(request.headers)
        headers["x-request-id"] = getattr(request.state, "request_id", headers.get("x-request-id", ""))
        exchange = await run_in_threadpool(
            controller.process,
            request.method,
            "/" + full_path,
            headers,
            dict(request.query_params),
            body,
            to_json_response,
        )
        return exchange.sent

    logger.info("FastAPI application created", routes=len(controller.router.routes))
    return app
