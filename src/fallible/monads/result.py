"""Result type for explicit, exception-free error propagation.

A Result is either a Success carrying a value or a Failure carrying an error
payload of any type. Combinators come in two families:

- Unprotected: map, map_err, recover, and_then, or_else, on_success, on_failure.
  A raise inside the callback escapes the combinator.
- Catching: map_catching, recover_catching, run_catching/pcall.
  A raise inside the callback becomes a Failure holding the raised payload.

get_or_throw() goes the other way and turns a carried failure back into a raise.

Performance notes:
- Uses __slots__ for minimal memory footprint
- Pass-through paths return the receiver instead of allocating
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from pydantic import ValidationError

from fallible.config import get_settings
from fallible.errors import payload_of, throw

from .optional import Optional

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_SUCCESS = True
_FAILURE = False

# Default for get_or_throw so None stays a valid override payload
_UNSET: object = object()

logger = logging.getLogger("fallible.result")


class Result(Generic[T, E]):
    """Discriminated union of Success(value) and Failure(error).

    Immutable: every combinator returns a new Result or the receiver itself.

    Examples:
        >>> Result.success("Hello").map(lambda s: s + " World!").get_or_nil()
        'Hello World!'
        >>> Result.failure("boom").map(str.upper).err_or_nil()
        'boom'
        >>> Result.failure("boom").recover(len).get_or_nil()
        4
    """

    __slots__ = ("_value", "_is_success")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_success: bool) -> None:
        """Private constructor. Use success() or failure() instead."""
        self._value = value
        self._is_success = is_success

    # ─── Construction ──────────────────────────────────────────────────

    @staticmethod
    def success(value: T) -> Result[T, E]:
        """Construct the Success variant. None is a valid value."""
        return Result(value, _SUCCESS)

    @staticmethod
    def failure(error: E) -> Result[T, E]:
        """Construct the Failure variant."""
        return Result(error, _FAILURE)

    @staticmethod
    def run_catching(fn: Callable[[], T]) -> Result[T, object]:
        """Call fn(); Success of its return value, or Failure of whatever it raised."""
        try:
            return Result(fn(), _SUCCESS)
        except Exception as e:
            return _captured("run_catching", e)

    pcall = run_catching

    @staticmethod
    def try_(fn: Callable[[], Generator[Result[object, E], object, T]]) -> Result[T, E]:
        """Run a generator block, unwrapping each yielded Result. See binding.result_try."""
        from .binding import result_try
        return result_try(fn)

    # ─── Predicates ────────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    # ─── Extraction ────────────────────────────────────────────────────

    def get_or_nil(self) -> T | None:
        """Success value, or None on Failure."""
        return self._value if self._is_success else None  # type: ignore[return-value]

    def err_or_nil(self) -> E | None:
        """Failure value, or None on Success."""
        return None if self._is_success else self._value  # type: ignore[return-value]

    def get_or_else(self, default: T) -> T:
        """Success value, or default on Failure."""
        return self._value if self._is_success else default  # type: ignore[return-value]

    def get_or_throw(self, error: object = _UNSET) -> T:
        """Success value. On Failure, raise the stored payload (or error, if given).

        Exception payloads are raised as themselves; any other payload is raised
        inside FailureRaised, whose .payload is the original value.
        """
        if self._is_success:
            return self._value  # type: ignore[return-value]
        throw(self._value if error is _UNSET else error)

    def ok(self) -> Optional[T]:
        """Present Optional of the success value, empty Optional on Failure."""
        return Optional.of(self._value) if self._is_success else Optional.empty()  # type: ignore[arg-type]

    # ─── Transformation ────────────────────────────────────────────────

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply fn to Success value. Raises from fn propagate."""
        return Result(fn(self._value), _SUCCESS) if self._is_success else self  # type: ignore[arg-type,return-value]

    def map_catching(self, fn: Callable[[T], U]) -> Result[U, object]:
        """Apply fn to Success value. Raises from fn become a Failure."""
        if not self._is_success:
            return self  # type: ignore[return-value]
        try:
            return Result(fn(self._value), _SUCCESS)  # type: ignore[arg-type]
        except Exception as e:
            return _captured("map_catching", e)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply fn to Failure value. Raises from fn propagate."""
        return self if self._is_success else Result(fn(self._value), _FAILURE)  # type: ignore[arg-type,return-value]

    def recover(self, fn: Callable[[E], T]) -> Result[T, E]:
        """Turn a Failure into Success(fn(error)). Raises from fn propagate."""
        return self if self._is_success else Result(fn(self._value), _SUCCESS)  # type: ignore[arg-type]

    def recover_catching(self, fn: Callable[[E], T]) -> Result[T, object]:
        """Turn a Failure into Success(fn(error)). A raise from fn replaces the error."""
        if self._is_success:
            return self  # type: ignore[return-value]
        try:
            return Result(fn(self._value), _SUCCESS)  # type: ignore[arg-type]
        except Exception as e:
            return _captured("recover_catching", e)

    # ─── Side Effects ──────────────────────────────────────────────────

    def on_success(self, fn: Callable[[T], object]) -> Result[T, E]:
        """Call fn with Success value, return self."""
        if self._is_success:
            fn(self._value)  # type: ignore[arg-type]
        return self

    def on_failure(self, fn: Callable[[E], object]) -> Result[T, E]:
        """Call fn with Failure value, return self."""
        if not self._is_success:
            fn(self._value)  # type: ignore[arg-type]
        return self

    # ─── Chaining ──────────────────────────────────────────────────────

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind. On Success, the Result returned by fn; on Failure, self.

        Example:
            >>> Result.success("Error").and_then(Result.failure).err_or_nil()
            'Error'
        """
        return fn(self._value) if self._is_success else self  # type: ignore[arg-type,return-value]

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """On Failure, the Result returned by fn; on Success, self."""
        return self if self._is_success else fn(self._value)  # type: ignore[arg-type,return-value]

    # ─── Pattern Matching ──────────────────────────────────────────────

    def match(self, *, success: Callable[[T], U], failure: Callable[[E], U]) -> U:
        """Exhaustive case analysis over both variants."""
        return success(self._value) if self._is_success else failure(self._value)  # type: ignore[arg-type]

    # ─── Dunder Methods ────────────────────────────────────────────────

    __hash__ = lambda self: hash((self._is_success, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Success' if self._is_success else 'Failure'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_success == other._is_success and self._value == other._value


def _captured(operation: str, exc: Exception) -> Result[T, object]:
    result: Result[T, object] = Result(payload_of(exc), _FAILURE)
    if logger.isEnabledFor(logging.DEBUG) and _log_captured():
        logger.debug("%s captured %s: %s", operation, type(exc).__name__, exc)
    return result


def _log_captured() -> bool:
    # Unparseable FALLIBLE_LOG_* values fall back to the default
    try:
        return get_settings().logging.log_captured
    except ValidationError:
        return True


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════

success = Result.success
failure = Result.failure
run_catching = Result.run_catching
pcall = Result.pcall


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T,E]] → Result[list[T], E]. Fail-fast on first Failure."""
    values: list[T] = []
    for r in results:
        if not r._is_success:
            return r  # type: ignore[return-value]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _SUCCESS)


def traverse(items: Iterable[T], fn: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map fn over items and sequence the results. Stops calling fn at the first Failure."""
    values: list[U] = []
    for item in items:
        r = fn(item)
        if not r._is_success:
            return r  # type: ignore[return-value]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _SUCCESS)
