"""actionhub.

A small pluggable action dispatcher. Named adapters register in a registry; a
single executor accepts requests naming an adapter, an action and a parameter
payload, invokes the adapter and publishes a normalized result on an async
channel.

Core subpackages
----------------

- ``actionhub.adapters``: the ``Adapter`` protocol, ``AdapterRegistry`` and
  the built-in ``calc``/``file``/``api`` adapters.
- ``actionhub.runtime``: request/result schemas, ``ResultChannel`` and
  ``Executor``.
- ``actionhub.core``: settings and logging setup.

Typical workflow
----------------

1. Build a registry (``factory.build_default_registry`` or by hand).
2. Build an ``Executor`` around the registry and a ``ResultChannel``.
3. ``await executor.execute({"adapter": ..., "action": ..., "params": ...})``
   or ``executor.submit(...)`` for fire-and-forget dispatch.
4. Drain the channel with ``async for result in channel``.

Every request yields exactly one result, either
``{"status": "success", "data": ...}`` or ``{"status": "error", "message": ...}``.
"""

from .adapters import Adapter, AdapterRegistry, AdapterResult
from .factory import build_default_registry, build_executor
from .runtime import ErrorResult, Executor, Request, ResultChannel, SuccessResult

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "AdapterResult",
    "ErrorResult",
    "Executor",
    "Request",
    "ResultChannel",
    "SuccessResult",
    "build_default_registry",
    "build_executor",
]
