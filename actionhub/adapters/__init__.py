"""Adapter contract, registry and built-in adapters.

An *adapter* is a named handler for a family of actions.

- The caller names an adapter, an action and a parameter payload.
- The executor resolves the adapter name through ``AdapterRegistry``.
- The adapter interprets the action and returns an ``AdapterResult``.

This package exports:

- ``Adapter``: protocol for async adapter implementations.
- ``AdapterResult``: success/failure outcome of one ``handle`` call.
- ``AdapterRegistry``: name → adapter implementation mapping.
- ``CalculatorAdapter``/``FileAdapter``/``ApiAdapter``: built-in adapters.
"""

from .base import UNKNOWN_ACTION, Adapter, AdapterResult
from .builtin import ApiAdapter, CalculatorAdapter, FileAdapter
from .registry import AdapterRegistry

__all__ = [
    "UNKNOWN_ACTION",
    "Adapter",
    "AdapterResult",
    "AdapterRegistry",
    "ApiAdapter",
    "CalculatorAdapter",
    "FileAdapter",
]
