"""Fallible - Result and Optional types for explicit error handling.

A Result is either a Success holding a value or a Failure holding an error
payload of any type. Fallible code returns Results instead of raising, and
the combinators decide explicitly where raised errors are captured.

Quick Start:
    >>> from fallible import Result
    >>>
    >>> result = (
    ...     Result.run_catching(lambda: int("42"))
    ...     .map(lambda n: n * 2)
    ...     .on_failure(print)
    ... )
    >>> result.get_or_nil()
    84

Catching vs. propagating:
    >>> Result.success(0).map_catching(lambda n: 1 / n).is_failure()
    True
    >>> Result.success(0).map(lambda n: 1 / n)
    Traceback (most recent call last):
    ...
    ZeroDivisionError: division by zero

Interop with raising code:
    >>> from fallible import throw
    >>> Result.run_catching(lambda: throw("Task failed successfully!"))
    Failure('Task failed successfully!')
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import EmptyOptionalError, FailureRaised, payload_of, throw
from .monads import (
    Optional,
    Result,
    failure,
    pcall,
    result_try,
    run_catching,
    sequence,
    success,
    traverse,
)

__all__ = [
    "__version__",
    # Types
    "Result",
    "Optional",
    # Constructors
    "success",
    "failure",
    "run_catching",
    "pcall",
    "result_try",
    # Collections
    "sequence",
    "traverse",
    # Errors
    "FailureRaised",
    "EmptyOptionalError",
    "throw",
    "payload_of",
]
