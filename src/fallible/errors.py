"""Exception types and the payload bridge between raised errors and carried failures.

Python can only raise exception instances, while a Failure may carry any value.
FailureRaised closes that gap: throw() wraps a non-exception payload into it and
payload_of() unwraps it again, so a payload survives raise -> catch unchanged.

Example:
    >>> from fallible.errors import throw, payload_of
    >>> try:
    ...     throw({"code": 404})
    ... except Exception as e:
    ...     payload_of(e)
    {'code': 404}
"""

from __future__ import annotations

from typing import NoReturn


class FailureRaised(Exception):
    """Raised to carry an arbitrary non-exception payload through raise/except."""

    __slots__ = ("payload",)

    def __init__(self, payload: object) -> None:
        super().__init__(payload)
        self.payload = payload

    def __str__(self) -> str:
        return str(self.payload)

    def __repr__(self) -> str:
        return f"FailureRaised({self.payload!r})"


class EmptyOptionalError(LookupError):
    """Value requested from an empty Optional."""

    def __init__(self, message: str = "No value present") -> None:
        super().__init__(message)


def throw(payload: object) -> NoReturn:
    """Raise payload: exceptions as themselves, anything else inside FailureRaised."""
    if isinstance(payload, BaseException):
        raise payload
    raise FailureRaised(payload)


def payload_of(exc: BaseException) -> object:
    """Recover the payload a raise was made with. Inverse of throw()."""
    return exc.payload if isinstance(exc, FailureRaised) else exc
