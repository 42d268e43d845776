from __future__ import annotations

import httpx
import pytest

from actionhub.adapters.builtin import ApiAdapter, CalculatorAdapter, FileAdapter
from actionhub.core.config import Settings
from actionhub.factory import build_channel, build_default_registry, build_executor
from actionhub.runtime.models import SuccessResult


def test_default_registry_contains_builtin_adapters(test_config: Settings) -> None:
    reg = build_default_registry(settings=test_config)
    assert reg.names() == ["api", "calc", "file"]
    assert isinstance(reg.get("api"), ApiAdapter)
    assert isinstance(reg.get("calc"), CalculatorAdapter)
    assert isinstance(reg.get("file"), FileAdapter)


def test_build_channel_from_settings() -> None:
    s = Settings(_env_file=None, ACTIONHUB_RESULT_CHANNEL_MAXSIZE=4)
    assert build_channel(settings=s).maxsize == 4


@pytest.mark.asyncio
async def test_build_executor_wires_default_registry(test_config: Settings) -> None:
    ex = build_executor(settings=test_config)
    assert ex.channel.maxsize == 32

    await ex.execute({"adapter": "calc", "action": "add", "params": {"a": 1, "b": 2}})
    assert await ex.channel.recv() == SuccessResult(data=3)
    await ex.registry.aclose()


@pytest.mark.asyncio
async def test_build_default_registry_uses_injected_http_client(test_config: Settings) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"ok": True}))
    client = httpx.AsyncClient(transport=transport)
    ex = build_executor(build_default_registry(http_client=client, settings=test_config), settings=test_config)

    await ex.execute({"adapter": "api", "action": "get", "params": {"url": "http://mock/ping"}})

    assert await ex.channel.recv() == SuccessResult(data={"ok": True})
    await client.aclose()
