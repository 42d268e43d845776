from __future__ import annotations

"""Adapter registry.

The registry maps an adapter name to an adapter implementation.

The executor uses this registry to resolve ``Request.adapter`` values into
concrete implementations.
"""

import logging
from typing import Dict, List, Optional

from ..errors import InvalidAdapterError
from .base import Adapter

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """
    In-memory mapping of adapter names to implementations.

    Notes:
        - ``register`` overwrites any existing mapping for the name.
        - ``get`` returns ``None`` if the adapter is missing.
        - Mutation is not synchronized. Register everything before the
          registry is handed to an ``Executor``.
    """

    def __init__(self) -> None:
        """Initialize an empty adapter registry."""
        self._adapters: Dict[str, Adapter] = {}

    def register(self, name: str, adapter: Adapter) -> None:
        """
        Register an adapter implementation under ``name``.

        Args:
            name: The routing key requests use in their ``adapter`` field.
            adapter: The adapter instance. It must expose a callable ``handle``.

        Raises:
            InvalidAdapterError: If ``adapter`` has no callable ``handle``.
        """
        if not callable(getattr(adapter, "handle", None)):
            raise InvalidAdapterError(name, adapter)
        if name in self._adapters:
            logger.debug("AdapterRegistry.register: replacing adapter '%s'", name)
        else:
            logger.debug("AdapterRegistry.register: adding adapter '%s'", name)
        self._adapters[name] = adapter

    def unregister(self, name: str) -> bool:
        """
        Remove the adapter registered under ``name``.

        Returns:
            True if an adapter was removed, False if none was registered.
        """
        return self._adapters.pop(name, None) is not None

    def get(self, name: str) -> Optional[Adapter]:
        """
        Retrieve a registered adapter by name.

        Args:
            name: The adapter name.

        Returns:
            The adapter implementation, or None when nothing is registered
            under ``name``.
        """
        return self._adapters.get(name)

    def has(self, name: str) -> bool:
        """
        Check if an adapter is registered.

        Args:
            name: The adapter name to check.

        Returns:
            True if registered, False otherwise.
        """
        return name in self._adapters

    def names(self) -> List[str]:
        """Return the registered adapter names, sorted."""
        return sorted(self._adapters)

    async def aclose(self) -> None:
        """Release resources held by registered adapters that expose ``aclose``."""
        for name, adapter in list(self._adapters.items()):
            close = getattr(adapter, "aclose", None)
            if callable(close):
                logger.debug("AdapterRegistry.aclose: closing adapter '%s'", name)
                await close()

    def __contains__(self, name: object) -> bool:
        return name in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)
