"""Error types for the action dispatcher.

These are raised for wiring mistakes (registering something that is not an
adapter, pushing onto a closed channel without checking). Request dispatch
itself never raises; failures are converted into ``ErrorResult`` values.
"""

from __future__ import annotations


class ActionHubError(Exception):
    """Base error for all actionhub exceptions."""


class InvalidAdapterError(ActionHubError, TypeError):
    """Raised when an object without an async ``handle`` method is registered."""

    def __init__(self, name: str, adapter: object) -> None:
        super().__init__(
            f"Cannot register '{name}': {type(adapter).__name__} does not implement handle(action, params)"
        )


class ChannelClosedError(ActionHubError):
    """Raised by non-suspending sends on a closed result channel."""

    def __init__(self) -> None:
        super().__init__("Result channel is closed")
