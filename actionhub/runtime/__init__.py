"""Dispatch runtime.

- ``Request``/``SuccessResult``/``ErrorResult`` describe what goes in and what
  comes out of the dispatcher.
- ``ResultChannel`` carries results from every producer to one consumer.
- ``Executor`` routes a request to its adapter and publishes the result.
"""

from .channel import ResultChannel
from .executor import Executor
from .models import ErrorResult, Request, Result, SuccessResult, parse_result

__all__ = [
    "ErrorResult",
    "Executor",
    "Request",
    "Result",
    "ResultChannel",
    "SuccessResult",
    "parse_result",
]
