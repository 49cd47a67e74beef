"""Result and Optional types for explicit error propagation.

Example:
    >>> from fallible.monads import Result
    >>>
    >>> def parse(s: str) -> Result[int, object]:
    ...     return Result.run_catching(lambda: int(s))
    >>>
    >>> parse("21").map(lambda n: n * 2).get_or_nil()
    42
    >>> parse("x").recover(lambda _: 0).get_or_nil()
    0
"""

from .binding import result_try
from .optional import Optional
from .result import Result, failure, pcall, run_catching, sequence, success, traverse

__all__ = [
    # Core types
    "Result",
    "Optional",
    # Constructors
    "success",
    "failure",
    "run_catching",
    "pcall",
    # Do-notation
    "result_try",
    # Collection operations
    "sequence",
    "traverse",
]
