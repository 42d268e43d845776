from __future__ import annotations

"""Convenience factories for wiring the dispatcher.

This module contains small helpers to build the default adapter registry and
an ``Executor`` with its ``ResultChannel`` from ``Settings``.

The intent is to keep application wiring and tests concise, while still
allowing deployments to provide their own registry and channel.
"""

from typing import Optional

import httpx

from .adapters.builtin import ApiAdapter, CalculatorAdapter, FileAdapter
from .adapters.registry import AdapterRegistry
from .core.config import Settings
from .core.config import settings as default_settings
from .runtime.channel import ResultChannel
from .runtime.executor import Executor


def build_default_registry(
    *,
    http_client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> AdapterRegistry:
    """Build the default ``AdapterRegistry``.

    The default registry includes the built-in adapters under the names
    ``api``, ``file`` and ``calc``.
    """
    cfg = settings or default_settings
    reg = AdapterRegistry()
    reg.register("api", ApiAdapter(client=http_client, timeout=cfg.http.timeout_seconds))
    reg.register("file", FileAdapter())
    reg.register("calc", CalculatorAdapter())
    return reg


def build_channel(*, settings: Optional[Settings] = None) -> ResultChannel:
    """Construct a ``ResultChannel`` sized from settings."""
    cfg = (settings or default_settings).executor
    return ResultChannel(cfg.result_channel_maxsize, drop_when_full=cfg.result_channel_drop_when_full)


def build_executor(
    registry: Optional[AdapterRegistry] = None,
    *,
    channel: Optional[ResultChannel] = None,
    settings: Optional[Settings] = None,
) -> Executor:
    """Construct an ``Executor`` from config, falling back to the default registry."""
    cfg = settings or default_settings
    return Executor(
        registry if registry is not None else build_default_registry(settings=cfg),
        channel if channel is not None else build_channel(settings=cfg),
        handler_timeout=cfg.executor.handler_timeout_seconds,
    )
