"""Request and response representations used by the front controller."""
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from designkit.domain.exceptions import InvalidStateTransitionError


class Request(BaseModel):
    """An incoming request, as seen by controllers."""
    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    headers: Dict[str, str] = Field(default_factory=dict)
    query: Dict[str, str] = Field(default_factory=dict)
    body: Any = None
    path_params: Dict[str, str] = Field(default_factory=dict)

    @field_validator("method")
    @classmethod
    def normalize_method(cls, v: str) -> str:
        return v.upper()

    @field_validator("path")
    @classmethod
    def normalize_path(cls, v: str) -> str:
        path = "/" + v.strip("/")
        return path

    def with_path_params(self, path_params: Dict[str, str]) -> "Request":
        """Copy of this request carrying the parameters captured by the router."""
        return self.model_copy(update={"path_params": dict(path_params)})


class Response(BaseModel):
    """The single response produced for a request."""
    model_config = ConfigDict(frozen=True)

    status_code: int = 200
    body: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class LifecycleState(str, Enum):
    """States a request passes through, in order."""
    RECEIVED = "received"
    ROUTED = "routed"
    HANDLED = "handled"
    RESPONDED = "responded"
    TERMINATED = "terminated"


_ORDER = list(LifecycleState)


class RequestLifecycle:
    """
    Tracks one request through Received -> Routed -> Handled -> Responded -> Terminated.

    Only the next state in that order may be entered.
    """

    def __init__(self) -> None:
        self.history: List[LifecycleState] = [LifecycleState.RECEIVED]

    @property
    def state(self) -> LifecycleState:
        return self.history[-1]

    def advance(self, next_state: LifecycleState) -> None:
        """
        Move to ``next_state``.

        Raises:
            InvalidStateTransitionError: If ``next_state`` is not the next state
        """
        position = _ORDER.index(self.state)
        if position + 1 >= len(_ORDER) or _ORDER[position + 1] != next_state:
            raise InvalidStateTransitionError(self.state.value, next_state.value)
        self.history.append(next_state)

    @property
    def is_terminated(self) -> bool:
        return self.state == LifecycleState.TERMINATED
