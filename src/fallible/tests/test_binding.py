"""Tests for generator do-notation (result_try / Result.try_)."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from fallible import Result, result_try, throw


def test_unwraps_yielded_successes() -> None:
    def block() -> Generator[Result[int, str], int, int]:
        a = yield Result.success(2)
        b = yield Result.success(3)
        return a * b

    assert result_try(block) == Result.success(6)


def test_short_circuits_on_failure() -> None:
    reached: list[str] = []

    def block() -> Generator[Result[int, str], int, int]:
        yield Result.failure("stop")
        reached.append("after")
        return 1

    assert Result.try_(block) == Result.failure("stop")
    assert reached == []


def test_closes_generator_on_failure() -> None:
    cleaned: list[bool] = []

    def block() -> Generator[Result[int, str], int, None]:
        try:
            yield Result.failure("stop")
        finally:
            cleaned.append(True)

    result_try(block)
    assert cleaned == [True]


def test_returned_result_is_not_wrapped() -> None:
    def block() -> Generator[Result[int, str], int, Result[int, str]]:
        value = yield Result.success(1)
        return Result.failure(f"rejected {value}")

    assert result_try(block) == Result.failure("rejected 1")


def test_captures_raises_in_block() -> None:
    def block() -> Generator[Result[int, str], int, int]:
        yield Result.success(1)
        throw("Oh noes")

    assert result_try(block) == Result.failure("Oh noes")


def test_get_or_throw_inside_block_is_captured() -> None:
    def block() -> Generator[Result[int, str], int, int]:
        return Result.failure("inner").get_or_throw()
        yield  # pragma: no cover

    assert result_try(block) == Result.failure("inner")


def test_plain_function_return_value() -> None:
    assert result_try(lambda: 5) == Result.success(5)
    assert result_try(lambda: Result.failure("x")) == Result.failure("x")


def test_yielding_non_result_raises_type_error() -> None:
    def block() -> Generator[object, object, None]:
        yield 42

    with pytest.raises(TypeError, match="expected Result"):
        result_try(block)  # type: ignore[arg-type]


def test_cleanup_raise_after_failure_is_captured() -> None:
    def block() -> Generator[Result[int, str], int, None]:
        try:
            yield Result.failure("stop")
        finally:
            raise ValueError("cleanup failed")

    result = result_try(block)
    assert result.is_failure()
    assert isinstance(result.err_or_nil(), ValueError)
    assert str(result.err_or_nil()) == "cleanup failed"
