"""Router - maps (method, path) to exactly one controller action."""
import re
import threading
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Pattern

from designkit.api.models import Request
from designkit.domain.exceptions import ConfigurationError, RouteNotFoundError
from designkit.infrastructure.logging.logger import get_logger

_PARAM_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

Action = Callable[[Request], Any]


class Route(NamedTuple):
    method: str
    template: str
    pattern: Pattern[str]
    controller: Any
    action: str

    @property
    def name(self) -> str:
        return f"{type(self.controller).__name__}.{self.action}"


class RouteMatch(NamedTuple):
    route: Route
    handler: Action
    path_params: Dict[str, str]


def _compile(template: str) -> Pattern[str]:
    normalized = "/" + template.strip("/")
    parts = []
    last = 0
    for match in _PARAM_PATTERN.finditer(normalized):
        parts.append(re.escape(normalized[last:match.start()]))
        parts.append(f"(?P<{match.group(1)}>[^/]+)")
        last = match.end()
    parts.append(re.escape(normalized[last:]))
    return re.compile("^" + "".join(parts) + "$")


class Router:
    """
    Route table.

    Routes are matched in registration order; the first match wins. Path
    templates may contain ``{name}`` placeholders matching one path segment.
    """

    def __init__(self) -> None:
        self._routes: List[Route] = []
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def add_route(self, method: str, template: str, controller: Any, action: str) -> None:
        """
        Register ``controller.action`` for a method and path template.

        Raises:
            ConfigurationError: If the controller has no such action, or the route exists
        """
        if not callable(getattr(controller, action, None)):
            raise ConfigurationError(f"{type(controller).__name__} has no action '{action}'")
        method = method.upper()
        with self._lock:
            for existing in self._routes:
                if existing.method == method and existing.template == template:
                    raise ConfigurationError(f"Route already registered: {method} {template}")
            self._routes.append(Route(method, template, _compile(template), controller, action))
        self.logger.debug("Registered route", method=method, path=template, action=action)

    def get(self, template: str, controller: Any, action: str) -> None:
        self.add_route("GET", template, controller, action)

    def post(self, template: str, controller: Any, action: str) -> None:
        self.add_route("POST", template, controller, action)

    def match(self, request: Request) -> RouteMatch:
        """
        Find the action for a request.

        Raises:
            RouteNotFoundError: If no route matches
        """
        for route in self._routes:
            if route.method != request.method:
                continue
            found = route.pattern.match(request.path)
            if found:
                return RouteMatch(route, getattr(route.controller, route.action), found.groupdict())
        raise RouteNotFoundError(request.method, request.path)

    @property
    def routes(self) -> List[Route]:
        return list(self._routes)

    def describe(self) -> List[Dict[str, Optional[str]]]:
        """Route table as plain dictionaries."""
        return [
            {"method": route.method, "path": route.template, "action": route.name}
            for route in self._routes
        ]
