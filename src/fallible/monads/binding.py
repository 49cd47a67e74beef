"""Generator-based do-notation for Result.

Inside a result_try block, ``yield some_result`` evaluates to the success value,
or ends the whole block with that failure. Avoids nesting and_then callbacks
when later steps need several earlier values.

Example:
    >>> from fallible import Result, result_try
    >>> def block():
    ...     a = yield Result.success(2)
    ...     b = yield Result.success(3)
    ...     return a * b
    >>> result_try(block)
    Success(6)
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Callable, TypeVar

from .result import Result, _captured

T = TypeVar("T")
E = TypeVar("E")


def result_try(fn: Callable[[], Generator[Result[object, E], object, T]]) -> Result[T, E]:
    """Drive the generator returned by fn, short-circuiting on the first failure.

    The block's return value is wrapped in success() unless it already is a
    Result. Exceptions raised inside the block are captured as a failure, as
    run_catching does, including a raise from cleanup while the block is
    closed after a yielded failure. Yielding anything but a Result raises TypeError.
    """
    try:
        gen = fn()
    except Exception as e:
        return _captured("result_try", e)
    if not isinstance(gen, Generator):
        return gen if isinstance(gen, Result) else Result.success(gen)

    sent: object = None
    while True:
        try:
            step = gen.send(sent)
        except StopIteration as stop:
            returned = stop.value
            return returned if isinstance(returned, Result) else Result.success(returned)
        except Exception as e:
            return _captured("result_try", e)
        if not isinstance(step, Result):
            gen.close()
            raise TypeError(f"result_try block yielded {type(step).__name__}, expected Result")
        if step.is_failure():
            try:
                gen.close()
            except Exception as e:
                return _captured("result_try", e)
            return step  # type: ignore[return-value]
        sent = step.get_or_nil()
