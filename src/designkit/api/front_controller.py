"""
Front controller.

The single entry point for every request: it builds the request
representation, routes it to exactly one controller action, produces exactly
one response, hands that response to the sender and then runs the
termination hooks.
"""
import time
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from pydantic import ValidationError as PydanticValidationError

from designkit.api.models import LifecycleState, Request, RequestLifecycle, Response
from designkit.api.router import Router
from designkit.domain.exceptions import (
    RouteNotFoundError,
    UnsupportedKindError,
    ValidationError,
)
from designkit.infrastructure.logging.logger import get_logger

Sender = Callable[[Response], Any]
TerminateHook = Callable[[Request, Response], None]


class Exchange(NamedTuple):
    """Everything one pass through the front controller produced."""
    request: Request
    response: Response
    lifecycle: RequestLifecycle
    sent: Any


class FrontController:
    """Receives every request and drives it through its lifecycle."""

    def __init__(self, router: Router, sender: Optional[Sender] = None):
        self.router = router
        self._sender: Sender = sender or (lambda response: response)
        self._terminate_hooks: List[TerminateHook] = []
        self.logger = get_logger(__name__)

    def on_terminate(self, hook: TerminateHook) -> None:
        """Register a hook run after the response has been sent."""
        self._terminate_hooks.append(hook)

    def handle(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        query: Optional[Dict[str, str]] = None,
        body: Any = None,
        sender: Optional[Sender] = None,
    ) -> Response:
        """Handle one request and return its response."""
        return self.process(method, path, headers, query, body, sender).response

    def process(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        query: Optional[Dict[str, str]] = None,
        body: Any = None,
        sender: Optional[Sender] = None,
    ) -> Exchange:
        """Handle one request and return the request, response, lifecycle and send result."""
        lifecycle = RequestLifecycle()
        start_time = time.time()
        request = Request(
            method=method,
            path=path,
            headers=dict(headers or {}),
            query=dict(query or {}),
            body=body,
        )

        try:
            match = self.router.match(request)
            request = request.with_path_params(match.path_params)
            action: Callable[[Request], Any] = match.handler
            action_name = match.route.name
        except RouteNotFoundError as e:
            action = self._not_found(e)
            action_name = "not_found"
        lifecycle.advance(LifecycleState.ROUTED)

        response = self._invoke(action, action_name, request)
        lifecycle.advance(LifecycleState.HANDLED)

        # A failing sender still ends Responded then Terminated before its error propagates
        try:
            sent = (sender or self._sender)(response)
        except Exception as e:
            self.logger.error(
                "Sending response failed",
                method=request.method,
                path=request.path,
                status_code=response.status_code,
                error=str(e),
            )
            raise
        finally:
            lifecycle.advance(LifecycleState.RESPONDED)
            self._terminate(request, response)
            lifecycle.advance(LifecycleState.TERMINATED)

        self.logger.info(
            "Request handled",
            method=request.method,
            path=request.path,
            action=action_name,
            status_code=response.status_code,
            duration=round(time.time() - start_time, 3),
        )
        return Exchange(request, response, lifecycle, sent)

    def _invoke(self, action: Callable[[Request], Any], action_name: str, request: Request) -> Response:
        try:
            return self._to_response(action(request))
        except (ValidationError, PydanticValidationError) as e:
            return self._error(422, "VALIDATION_ERROR", str(e))
        except UnsupportedKindError as e:
            return self._error(400, "UNSUPPORTED_KIND", str(e))
        except Exception as e:
            self.logger.error("Action failed", action=action_name, error=str(e), exc_info=True)
            return self._error(500, "INTERNAL_ERROR", "An internal error occurred")

    def _terminate(self, request: Request, response: Response) -> None:
        for hook in self._terminate_hooks:
            try:
                hook(request, response)
            except Exception as e:
                # Response already sent; remaining hooks still run
                self.logger.error("Terminate hook failed", hook=getattr(hook, "__name__", repr(hook)), error=str(e))

    @staticmethod
    def _to_response(result: Any) -> Response:
        if isinstance(result, Response):
            return result
        return Response(status_code=200, body=result)

    @staticmethod
    def _error(status_code: int, code: str, message: str) -> Response:
        return Response(
            status_code=status_code,
            body={"success": False, "error": {"code": code, "message": message}},
        )

    def _not_found(self, error: RouteNotFoundError) -> Callable[[Request], Response]:
        def not_found(request: Request) -> Response:
            return self._error(404, "NOT_FOUND", str(error))
        return not_found
