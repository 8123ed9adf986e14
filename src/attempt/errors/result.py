"""Result type for fallible operations.

Every attempt produces a Result and every run hands one back:
- Ok(value): the operation succeeded
- Err(error): the operation failed; when returned from a run, the retry
  budget is exhausted and `error` is the last failure observed

Also provides try_fn/try_fn_async for adapting callables that raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Callable, Generic, ParamSpec, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable

T = TypeVar("T")
E = TypeVar("E")
P = ParamSpec("P")


@dataclass(frozen=True, slots=True, repr=False)
class Result(Generic[T, E]):
    """Success or failure of one attempt, or of a whole run.

    Build with Ok()/Err() rather than directly. Equality and hashing are
    structural, so `run() == Err("timeout")` reads naturally in tests.

    Example:
        >>> res = Attempt.to(fetch).max_tries(3).run()
        >>> match res:
        ...     case Result(value, True):
        ...         handle(value)
        ...     case Result(error, False):
        ...         log.warning("gave up: %s", error)
    """

    value: T | E
    ok: bool

    def is_ok(self) -> bool:
        return self.ok

    def is_err(self) -> bool:
        return not self.ok

    def unwrap(self) -> T:
        """Success value. Raises RuntimeError on Err."""
        return self.expect("expected Ok")

    def expect(self, msg: str) -> T:
        """Success value, or RuntimeError carrying `msg` and the error."""
        if not self.ok:
            raise RuntimeError(f"{msg}: {self.value!r}")
        return self.value  # type: ignore[return-value]

    def unwrap_err(self) -> E:
        """Failure value. Raises RuntimeError on Ok."""
        if self.ok:
            raise RuntimeError(f"expected Err: {self.value!r}")
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return self.value if self.ok else default  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        return f"{'Ok' if self.ok else 'Err'}({self.value!r})"

    __str__ = __repr__


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Successful outcome."""
    return Result(value, True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Failed outcome; from a run, the last failure once retries are spent."""
    return Result(error, False)


def try_fn(
    fn: Callable[P, T],
    *catch: type[Exception],
) -> Callable[P, Result[T, Exception]]:
    """Wrap a raising callable so it returns Ok(value) or Err(exception).

    Only the listed exception types are captured (default: Exception).
    Anything else propagates to the caller.

    Example:
        >>> parse = try_fn(int, ValueError)
        >>> parse("42")
        Ok(42)
        >>> parse("x").is_err()
        True
    """
    caught = catch or (Exception,)

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        try:
            return Ok(fn(*args, **kwargs))
        except caught as e:
            return Err(e)

    return wrapper


def try_fn_async(
    fn: Callable[P, Awaitable[T]],
    *catch: type[Exception],
) -> Callable[P, Awaitable[Result[T, Exception]]]:
    """Async variant of try_fn. Cancellation is never captured."""
    caught = catch or (Exception,)

    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        try:
            return Ok(await fn(*args, **kwargs))
        except caught as e:
            return Err(e)

    return wrapper
