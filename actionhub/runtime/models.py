"""Request envelope and result schemas.

``Request`` is what callers hand to ``Executor.execute``; ``SuccessResult`` and
``ErrorResult`` are the only values ever placed on the result channel. Their
``model_dump()`` is the wire shape::

    {"status": "success", "data": <value>}
    {"status": "error", "message": <str>}
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class BaseSchema(BaseModel):
    """
    Base Pydantic model for dispatcher schemas.

    Configures common Pydantic behaviors:
    - ``frozen=True``: requests and results are transient values, never mutated in flight.
    - ``extra="forbid"``: Prevent unknown fields from slipping into the model.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


class Request(BaseSchema):
    """Routing envelope naming an adapter, an action and opaque parameters."""

    adapter: str = ""
    action: str = ""
    params: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> Request:
        """
        Build a request from an arbitrary payload without raising.

        ``adapter`` and ``action`` fall back to ``""`` when absent or not a
        string, ``params`` falls back to ``None``. A payload that is not a
        mapping routes nowhere (adapter ``""``). Existing ``Request`` objects
        are returned unchanged.
        """
        if isinstance(payload, Request):
            return payload
        if not isinstance(payload, Mapping):
            payload = {}
        adapter = payload.get("adapter")
        action = payload.get("action")
        return cls(
            adapter=adapter if isinstance(adapter, str) else "",
            action=action if isinstance(action, str) else "",
            params=payload.get("params"),
        )


class SuccessResult(BaseSchema):
    """Adapter completed the action; ``data`` is its returned value."""

    status: Literal["success"] = "success"
    data: Any = None

    @property
    def ok(self) -> bool:
        return True


class ErrorResult(BaseSchema):
    """Request could not be served; ``message`` is human readable."""

    status: Literal["error"] = "error"
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Annotated[Union[SuccessResult, ErrorResult], Field(discriminator="status")]

_RESULT_ADAPTER: TypeAdapter[Union[SuccessResult, ErrorResult]] = TypeAdapter(Result)


def parse_result(payload: Mapping[str, Any]) -> Union[SuccessResult, ErrorResult]:
    """Validate a plain ``{"status": ...}`` dictionary into the matching result model."""
    return _RESULT_ADAPTER.validate_python(payload)
