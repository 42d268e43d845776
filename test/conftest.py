from __future__ import annotations

from typing import AsyncIterator, Iterable

import httpx
import pytest
import pytest_asyncio

from actionhub.adapters import AdapterRegistry, CalculatorAdapter, FileAdapter
from actionhub.core.config import Settings
from actionhub.runtime import Executor, ResultChannel


@pytest.fixture(scope="session")
def test_config() -> Settings:
    """Settings built from defaults only, ignoring the developer's .env file."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
    )

    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str) or isinstance(self._transport, httpx.MockTransport):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)


@pytest.fixture
def registry() -> AdapterRegistry:
    reg = AdapterRegistry()
    reg.register("calc", CalculatorAdapter())
    reg.register("file", FileAdapter())
    return reg


@pytest.fixture
def channel() -> ResultChannel:
    return ResultChannel()


@pytest_asyncio.fixture
async def executor(registry: AdapterRegistry, channel: ResultChannel) -> AsyncIterator[Executor]:
    ex = Executor(registry, channel)
    yield ex
    await ex.drain()
