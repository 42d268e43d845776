from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import httpx

from .base import UNKNOWN_ACTION, Adapter, AdapterResult

logger = logging.getLogger(__name__)


def _as_mapping(params: Any) -> Mapping[str, Any]:
    return params if isinstance(params, Mapping) else {}


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass but never a valid operand
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


@dataclass(frozen=True)
class CalculatorAdapter(Adapter):
    """
    Adapter for integer arithmetic.

    Operands that are missing or not integers (floats, numeric strings and
    booleans included) count as ``0``. The adapter never reports a validation
    error for operands.
    """

    async def handle(self, action: str, params: Any) -> AdapterResult:
        """
        Run an arithmetic action.

        Args:
            action: ``add`` is the only supported action.
            params: Dictionary of arguments:
                - a (int): First operand.
                - b (int): Second operand.

        Returns:
            AdapterResult: The integer sum, or ``Unknown action``.
        """
        if action != "add":
            return AdapterResult.failure(UNKNOWN_ACTION)

        args = _as_mapping(params)
        a = _as_int(args.get("a"))
        b = _as_int(args.get("b"))
        if a is None or b is None:
            logger.debug(
                "CalculatorAdapter.add: defaulting non-integer operand(s) to 0 (a=%r, b=%r)",
                args.get("a"),
                args.get("b"),
            )
        return AdapterResult.success((a or 0) + (b or 0))


@dataclass(frozen=True)
class FileAdapter(Adapter):
    """
    Adapter for writing files on the local filesystem.

    The write itself runs in a worker thread so the event loop is never blocked.
    """

    async def handle(self, action: str, params: Any) -> AdapterResult:
        """
        Run a file action.

        Args:
            action: ``write`` is the only supported action.
            params: Dictionary of arguments:
                - path (str): Target file path. Existing files are overwritten.
                - content (str): Text written to the file.

        Returns:
            AdapterResult:
                - Success: data is ``"File written"``
                - Failure: ``Missing path``, ``Missing content`` or the OS error message
        """
        if action != "write":
            return AdapterResult.failure(UNKNOWN_ACTION)

        args = _as_mapping(params)
        path = args.get("path")
        content = args.get("content")
        if not isinstance(path, str) or not path:
            return AdapterResult.failure("Missing path")
        if not isinstance(content, str):
            return AdapterResult.failure("Missing content")

        try:
            await asyncio.to_thread(Path(path).write_text, content, encoding="utf-8")
        except (OSError, ValueError) as e:
            logger.debug("FileAdapter.write: failed to write %s: %s", path, e)
            return AdapterResult.failure(str(e))
        logger.debug("FileAdapter.write: wrote %d chars to %s", len(content), path)
        return AdapterResult.success("File written")


class ApiAdapter(Adapter):
    """
    Adapter for fetching JSON resources over HTTP.

    The ``httpx.AsyncClient`` can be injected, which is how tests route calls
    through ``httpx.MockTransport``. A client created here is owned by the
    adapter and released by ``aclose``.
    """

    def __init__(self, *, client: Optional[httpx.AsyncClient] = None, timeout: float = 10.0) -> None:
        self._owns_client = client is None
        self._http = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def handle(self, action: str, params: Any) -> AdapterResult:
        """
        Run an HTTP action.

        Args:
            action: ``get`` is the only supported action.
            params: Dictionary of arguments:
                - url (str): The resource to fetch.

        Returns:
            AdapterResult: The decoded JSON body, or the transport, status or decode error.
        """
        if action != "get":
            return AdapterResult.failure(UNKNOWN_ACTION)

        url = _as_mapping(params).get("url")
        if not isinstance(url, str) or not url.strip():
            return AdapterResult.failure("Missing URL")

        logger.debug("ApiAdapter.get: GET %s", url)
        try:
            r = await self._http.get(url)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            return AdapterResult.failure(f"GET {url} failed: {e.response.status_code}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return AdapterResult.failure(f"GET {url} failed: {e}")

        try:
            data = r.json()
        except ValueError as e:
            return AdapterResult.failure(f"GET {url} returned invalid JSON: {e}")
        return AdapterResult.success(data)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
