"""End-to-end dispatch scenarios: registry + executor + channel + built-in adapters."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List

import httpx
import pytest

from actionhub.adapters import AdapterRegistry, AdapterResult, ApiAdapter
from actionhub.runtime import ErrorResult, Executor, ResultChannel, SuccessResult


@dataclass(frozen=True)
class _DelayedAdapter:
    delay: float
    label: str

    async def handle(self, action: str, params: Any) -> AdapterResult:
        await asyncio.sleep(self.delay)
        return AdapterResult.success(self.label)


async def _collect(channel: ResultChannel, n: int, timeout: float = 2.0) -> List[Any]:
    return [await asyncio.wait_for(channel.recv(), timeout) for _ in range(n)]


@pytest.mark.asyncio
async def test_calc_add(executor: Executor, channel: ResultChannel) -> None:
    await executor.execute({"adapter": "calc", "action": "add", "params": {"a": 5, "b": 10}})
    res = await channel.recv()
    assert res.model_dump() == {"status": "success", "data": 15}


@pytest.mark.asyncio
async def test_calc_add_missing_operand_defaults_to_zero(executor: Executor, channel: ResultChannel) -> None:
    await executor.execute({"adapter": "calc", "action": "add", "params": {"a": 5}})
    res = await channel.recv()
    assert res.model_dump() == {"status": "success", "data": 5}


@pytest.mark.asyncio
async def test_calc_unknown_action(executor: Executor, channel: ResultChannel) -> None:
    await executor.execute({"adapter": "calc", "action": "subtract", "params": {"a": 5, "b": 1}})
    res = await channel.recv()
    assert res.model_dump() == {"status": "error", "message": "Unknown action"}


@pytest.mark.asyncio
async def test_file_write(executor: Executor, channel: ResultChannel, tmp_path: Path) -> None:
    target = tmp_path / "x"
    await executor.execute({"adapter": "file", "action": "write", "params": {"path": str(target), "content": "hi"}})
    res = await channel.recv()
    assert res.model_dump() == {"status": "success", "data": "File written"}
    assert target.read_text(encoding="utf-8") == "hi"


@pytest.mark.asyncio
async def test_file_write_missing_content(executor: Executor, channel: ResultChannel, tmp_path: Path) -> None:
    await executor.execute({"adapter": "file", "action": "write", "params": {"path": str(tmp_path / "x")}})
    res = await channel.recv()
    assert res.model_dump() == {"status": "error", "message": "Missing content"}


@pytest.mark.asyncio
async def test_unknown_adapter_publishes_exactly_one_error(executor: Executor, channel: ResultChannel) -> None:
    await executor.execute({"adapter": "ghost", "action": "noop", "params": {}})

    res = await asyncio.wait_for(channel.recv(), timeout=1.0)
    assert res == ErrorResult(message="Unknown adapter: ghost")
    assert channel.qsize() == 0


@pytest.mark.asyncio
async def test_concurrent_requests_complete_out_of_submission_order() -> None:
    reg = AdapterRegistry()
    reg.register("slow", _DelayedAdapter(delay=0.2, label="slow"))
    reg.register("fast", _DelayedAdapter(delay=0.01, label="fast"))
    ch = ResultChannel()
    ex = Executor(reg, ch)

    ex.submit({"adapter": "slow", "action": "run"})
    ex.submit({"adapter": "fast", "action": "run"})

    results = await _collect(ch, 2)
    await ex.drain()

    assert results == [SuccessResult(data="fast"), SuccessResult(data="slow")]


@pytest.mark.asyncio
async def test_api_get_through_executor() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/todos/1":
            return httpx.Response(200, json={"id": 1, "done": False})
        return httpx.Response(500, json={})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    reg = AdapterRegistry()
    reg.register("api", ApiAdapter(client=client))
    ch = ResultChannel()
    ex = Executor(reg, ch)

    await ex.execute_many(
        [
            {"adapter": "api", "action": "get", "params": {"url": "http://mock/todos/1"}},
            {"adapter": "api", "action": "get", "params": {}},
        ]
    )
    results = await _collect(ch, 2)
    await client.aclose()

    assert SuccessResult(data={"id": 1, "done": False}) in results
    assert ErrorResult(message="Missing URL") in results


@pytest.mark.asyncio
async def test_consumer_loop_drains_until_close(executor: Executor, channel: ResultChannel) -> None:
    requests = [{"adapter": "calc", "action": "add", "params": {"a": i, "b": i}} for i in range(5)]
    requests.append({"adapter": "ghost", "action": "noop"})

    async def consume() -> List[Any]:
        return [r.model_dump() async for r in channel]

    consumer = asyncio.create_task(consume())
    await executor.execute_many(requests)
    channel.close()
    seen = await asyncio.wait_for(consumer, timeout=2.0)

    assert len(seen) == 6
    assert sorted(r["data"] for r in seen if r["status"] == "success") == [0, 2, 4, 6, 8]
    assert [r for r in seen if r["status"] == "error"] == [{"status": "error", "message": "Unknown adapter: ghost"}]
