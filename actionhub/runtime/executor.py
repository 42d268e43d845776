from __future__ import annotations

"""Request executor.

``Executor.execute`` is the single dispatch point:

  1. normalize the incoming payload into a ``Request``,
  2. resolve ``Request.adapter`` through the ``AdapterRegistry``,
  3. await ``handle(action, params)`` on the adapter,
  4. convert the outcome into a ``SuccessResult`` or ``ErrorResult``,
  5. publish that result on the ``ResultChannel``.

Nothing raised by an adapter escapes ``execute``. Unknown adapters, adapter
failures, adapter crashes and timeouts all become an ``ErrorResult``, so every
call publishes exactly one result. Publication is fire-and-forget: a result
the channel refuses is logged and dropped.
"""

import asyncio
import logging
from typing import Any, Iterable, Optional, Set, Union

from ..adapters.base import AdapterResult
from ..adapters.registry import AdapterRegistry
from .channel import ResultChannel
from .models import ErrorResult, Request, SuccessResult

logger = logging.getLogger(__name__)

ResultItem = Union[SuccessResult, ErrorResult]


class Executor:
    """Dispatch requests to registered adapters and publish normalized results.

    The executor is stateless per call and safe to use from many concurrent
    tasks, as long as the registry is no longer mutated.
    """

    def __init__(
        self,
        registry: AdapterRegistry,
        channel: ResultChannel,
        *,
        handler_timeout: Optional[float] = None,
    ) -> None:
        """
        Args:
            registry: Fully built adapter registry.
            channel: Destination for every result.
            handler_timeout: Seconds a single ``handle`` call may take. ``None``
                waits indefinitely.
        """
        self._registry = registry
        self._channel = channel
        self._handler_timeout = handler_timeout
        self._tasks: Set[asyncio.Task[None]] = set()

    @property
    def registry(self) -> AdapterRegistry:
        return self._registry

    @property
    def channel(self) -> ResultChannel:
        return self._channel

    async def execute(self, request: Any) -> None:
        """Dispatch one request and publish its result."""
        await self.dispatch(request)

    async def dispatch(self, request: Any) -> ResultItem:
        """
        Dispatch one request, publish its result and return it.

        Args:
            request: A ``Request`` or any mapping with ``adapter``, ``action``
                and ``params`` keys. Malformed values fall back to defaults.

        Returns:
            The result that was handed to the channel.
        """
        req = Request.from_payload(request)
        result = await self._run(req)
        await self._publish(req, result)
        return result

    def submit(self, request: Any) -> asyncio.Task[None]:
        """Schedule ``execute`` as an independent task on the running loop."""
        task = asyncio.create_task(self.execute(request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def execute_many(self, requests: Iterable[Any]) -> None:
        """Execute several requests concurrently. Results arrive in completion order."""
        await asyncio.gather(*(self.execute(r) for r in requests))

    async def drain(self) -> None:
        """Wait for every task created by ``submit`` to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _run(self, req: Request) -> ResultItem:
        adapter = self._registry.get(req.adapter)
        if adapter is None:
            logger.warning("Executor: unknown adapter '%s' (action='%s')", req.adapter, req.action)
            return ErrorResult(message=f"Unknown adapter: {req.adapter}")

        logger.debug("Executor: dispatching %s.%s", req.adapter, req.action)
        deadline = asyncio.timeout(self._handler_timeout)
        try:
            async with deadline:
                outcome = await adapter.handle(req.action, req.params)
        except TimeoutError as e:
            if not deadline.expired():
                logger.exception("Executor: adapter '%s' raised during action '%s'", req.adapter, req.action)
                return ErrorResult(message=str(e) or type(e).__name__)
            logger.warning(
                "Executor: adapter '%s' timed out after %ss (action='%s')",
                req.adapter,
                self._handler_timeout,
                req.action,
            )
            return ErrorResult(message=f"Adapter '{req.adapter}' timed out after {self._handler_timeout}s")
        except Exception as e:
            logger.exception("Executor: adapter '%s' raised during action '%s'", req.adapter, req.action)
            return ErrorResult(message=str(e) or type(e).__name__)

        return self._normalize(outcome)

    @staticmethod
    def _normalize(outcome: Any) -> ResultItem:
        if isinstance(outcome, AdapterResult):
            if outcome.ok:
                return SuccessResult(data=outcome.data)
            return ErrorResult(message=outcome.error or "")
        # Adapters that return a bare value are treated as successful
        return SuccessResult(data=outcome)

    async def _publish(self, req: Request, result: ResultItem) -> None:
        if not await self._channel.send(result):
            logger.warning(
                "Executor: dropped %s result for %s.%s (channel closed or full)",
                result.status,
                req.adapter,
                req.action,
            )
