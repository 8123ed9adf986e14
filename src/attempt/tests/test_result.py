"""Tests for the Result type and exception adapters."""

from __future__ import annotations

import asyncio

import pytest

from attempt import Err, Ok, Result, try_fn, try_fn_async


# ═════════════════════════════════════════════════════════════════════════════
# Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_on_wrong_variant_raises() -> None:
    with pytest.raises(RuntimeError, match="expected Ok: 'boom'"):
        Err("boom").unwrap()
    with pytest.raises(RuntimeError, match="expected Err: 1"):
        Ok(1).unwrap_err()
    with pytest.raises(RuntimeError, match="context: 'boom'"):
        Err("boom").expect("context")


def test_extraction_on_matching_variant() -> None:
    assert Ok(3).unwrap() == 3
    assert Ok(3).expect("unused") == 3
    assert Err("e").unwrap_err() == "e"
    assert Err("e").unwrap_or(0) == 0
    assert Ok(5).unwrap_or(0) == 5
    assert Ok(1).is_ok() and Err(1).is_err()


def test_equality_hash_and_repr() -> None:
    assert Ok(1) == Ok(1) and Ok(1) != Err(1)
    assert len({Ok(1), Ok(1), Err(1)}) == 2
    assert bool(Ok(None)) and not bool(Err(None))
    assert repr(Ok("a")) == "Ok('a')" and str(Err(1)) == "Err(1)"


def test_results_are_immutable() -> None:
    with pytest.raises(AttributeError):
        Ok(1).value = 2  # type: ignore[misc]


def test_structural_pattern_matching() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Result(value, True):
                return f"got {value}"
            case Result(error, False):
                return f"gave up: {error}"
        return "unreachable"
    
    assert describe(Ok(7)) == "got 7"
    assert describe(Err("timeout")) == "gave up: timeout"


# ═════════════════════════════════════════════════════════════════════════════
# Exception Adapters
# ═════════════════════════════════════════════════════════════════════════════


def test_try_fn_captures_listed_exceptions() -> None:
    parse = try_fn(int, ValueError)
    assert parse("42") == Ok(42)
    err = parse("nope").unwrap_err()
    assert isinstance(err, ValueError)


def test_try_fn_propagates_unlisted_exceptions() -> None:
    def boom() -> int:
        raise KeyError("k")
    
    with pytest.raises(KeyError):
        try_fn(boom, ValueError)()
    assert isinstance(try_fn(boom)().unwrap_err(), KeyError)


@pytest.mark.asyncio
async def test_try_fn_async() -> None:
    async def fetch(fail: bool) -> str:
        if fail:
            raise ConnectionError("reset")
        return "data"
    
    wrapped = try_fn_async(fetch, ConnectionError)
    assert await wrapped(False) == Ok("data")
    assert isinstance((await wrapped(True)).unwrap_err(), ConnectionError)


@pytest.mark.asyncio
async def test_try_fn_async_never_captures_cancellation() -> None:
    async def hang() -> None:
        await asyncio.sleep(60)
    
    task = asyncio.create_task(try_fn_async(hang)())
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
