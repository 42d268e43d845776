from __future__ import annotations

"""Result channel.

A many-producer/single-consumer queue of ``SuccessResult``/``ErrorResult``
values built on ``asyncio.Queue``. Every ``Executor.execute`` call is a
producer; one consumer loop drains it with ``recv`` or ``async for``.

Delivery is best effort: ``send`` reports failure with ``False`` instead of
raising, so a producer never fails because of the channel.
"""

import asyncio
import logging
from typing import AsyncIterator, Optional, Union

from ..errors import ChannelClosedError
from .models import ErrorResult, SuccessResult

logger = logging.getLogger(__name__)

ResultItem = Union[SuccessResult, ErrorResult]


class ResultChannel:
    """
    Async queue of results with an explicit close.

    Args:
        maxsize: Capacity. ``0`` means unbounded.
        drop_when_full: When True, ``send`` on a full channel drops the result
            instead of suspending the producer until space frees up.
    """

    def __init__(self, maxsize: int = 0, *, drop_when_full: bool = False) -> None:
        self._queue: asyncio.Queue[ResultItem] = asyncio.Queue(maxsize=maxsize)
        self._drop_when_full = drop_when_full
        self._closed = asyncio.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    @property
    def maxsize(self) -> int:
        return self._queue.maxsize

    def qsize(self) -> int:
        return self._queue.qsize()

    def close(self) -> None:
        """Stop accepting results. Queued results remain receivable."""
        self._closed.set()

    def send_nowait(self, result: ResultItem) -> None:
        """
        Enqueue without suspending.

        Raises:
            ChannelClosedError: If the channel is closed.
            asyncio.QueueFull: If a bounded channel has no free slot.
        """
        if self.closed:
            raise ChannelClosedError()
        self._queue.put_nowait(result)

    async def send(self, result: ResultItem) -> bool:
        """
        Publish a result.

        Returns:
            True if the result was enqueued, False if it was dropped because the
            channel is closed or full with ``drop_when_full`` set.
        """
        if self.closed:
            return False
        if self._drop_when_full:
            try:
                self._queue.put_nowait(result)
            except asyncio.QueueFull:
                return False
            return True
        await self._queue.put(result)
        return True

    async def recv(self) -> Optional[ResultItem]:
        """
        Receive the next result.

        Returns:
            The next result, or None once the channel is closed and drained.
        """
        while True:
            if not self._queue.empty():
                return self._queue.get_nowait()
            if self.closed:
                return None

            getter = asyncio.ensure_future(self._queue.get())
            closer = asyncio.ensure_future(self._closed.wait())
            try:
                done, _ = await asyncio.wait({getter, closer}, return_when=asyncio.FIRST_COMPLETED)
            finally:
                getter.cancel()
                closer.cancel()
            if getter in done and not getter.cancelled():
                return getter.result()

    def __aiter__(self) -> AsyncIterator[ResultItem]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[ResultItem]:
        while True:
            item = await self.recv()
            if item is None:
                return
            yield item
