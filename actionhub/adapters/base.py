from __future__ import annotations

"""Adapter protocol and adapter result model.

An adapter is a named, independently pluggable handler. The executor resolves
``Request.adapter`` through an ``AdapterRegistry`` and calls
``handle(action, params)`` without knowing the concrete type.

Adapters should:

- interpret ``action`` as an internal sub-command and answer unrecognized
  actions with ``AdapterResult.failure("Unknown action")``,
- validate their own ``params`` and report missing or malformed fields as a
  failure rather than raising,
- be safe to call concurrently from several tasks.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

UNKNOWN_ACTION = "Unknown action"


@dataclass(frozen=True)
class AdapterResult:
    """Outcome of a single ``Adapter.handle`` call.

    Exactly one of ``data`` (when ``ok``) or ``error`` (when not ``ok``) is
    meaningful.
    """

    ok: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Any) -> AdapterResult:
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, message: str) -> AdapterResult:
        return cls(ok=False, error=message)


@runtime_checkable
class Adapter(Protocol):
    """Protocol for adapter implementations."""

    async def handle(self, action: str, params: Any) -> AdapterResult: ...
