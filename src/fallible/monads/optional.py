"""Optional container: either present with a value or empty.

Presence is tracked explicitly, so Optional.of(None) is present. Use
Optional.of_nilable() when None should mean "absent".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from fallible.errors import EmptyOptionalError

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Optional(Generic[T]):
    """Present(value) or empty.

    Examples:
        >>> Optional.of_nilable("x").map(str.upper).get()
        'X'
        >>> Optional.empty().or_else("fallback")
        'fallback'
    """

    __slots__ = ("_value", "_present")

    def __init__(self, value: T | None, present: bool) -> None:
        """Private constructor. Use of(), of_nilable() or empty() instead."""
        self._value = value
        self._present = present

    @staticmethod
    def of(value: T) -> Optional[T]:
        """Present Optional holding value, even when value is None."""
        return Optional(value, True)

    @staticmethod
    def of_nilable(value: T | None) -> Optional[T]:
        """Present Optional holding value, or empty when value is None."""
        return _EMPTY if value is None else Optional(value, True)

    @staticmethod
    def empty() -> Optional[T]:
        return _EMPTY

    def is_present(self) -> bool:
        return self._present

    def is_empty(self) -> bool:
        return not self._present

    def get(self) -> T:
        """Contained value. Raises EmptyOptionalError when empty."""
        if not self._present:
            raise EmptyOptionalError()
        return self._value  # type: ignore[return-value]

    def or_else(self, default: T) -> T:
        return self._value if self._present else default  # type: ignore[return-value]

    def or_else_get(self, fn: Callable[[], T]) -> T:
        return self._value if self._present else fn()  # type: ignore[return-value]

    def or_else_throw(self, message: str | None = None) -> T:
        """Contained value, or raise EmptyOptionalError with message."""
        if not self._present:
            raise EmptyOptionalError(message) if message else EmptyOptionalError()
        return self._value  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U | None]) -> Optional[U]:
        """Apply fn when present; a None result yields an empty Optional."""
        return Optional.of_nilable(fn(self._value)) if self._present else _EMPTY  # type: ignore[arg-type]

    def and_then(self, fn: Callable[[T], Optional[U]]) -> Optional[U]:
        return fn(self._value) if self._present else _EMPTY  # type: ignore[arg-type]

    def or_(self, fn: Callable[[], Optional[T]]) -> Optional[T]:
        return self if self._present else fn()

    def if_present(self, fn: Callable[[T], object]) -> Optional[T]:
        if self._present:
            fn(self._value)  # type: ignore[arg-type]
        return self

    def if_not_present(self, fn: Callable[[], object]) -> Optional[T]:
        if not self._present:
            fn()
        return self

    def ok_or(self, error: E) -> Result[T, E]:
        """Success of the value when present, Failure(error) when empty."""
        from .result import Result
        return Result.success(self._value) if self._present else Result.failure(error)  # type: ignore[arg-type]

    __hash__ = lambda self: hash((self._present, self._value))  # noqa: E731
    __repr__ = lambda self: f"Optional({self._value!r})" if self._present else "Optional.empty"  # noqa: E731

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self._present == other._present and self._value == other._value


_EMPTY: Optional = Optional(None, False)
