"""Fluent builder for retrying fallible operations.

Example:
    >>> from datetime import timedelta
    >>> from attempt import Attempt
    >>>
    >>> res = (
    ...     Attempt.to(fetch_data_from_unreliable_api)
    ...     .delay(timedelta(seconds=1))
    ...     .max_tries(1000)
    ...     .run()
    ... )
    >>>
    >>> # Sensible default: 10 tries, delay growing 25% per retry from 500ms
    >>> res = Attempt.to(fetch_data_from_unreliable_api).run()
    >>>
    >>> # Be careful with this one: never gives up
    >>> data = Attempt.infinitely(fetch_data_from_unreliable_api)
    >>>
    >>> # Async operations, awaited inside the current task
    >>> res = await Attempt.to(fetch_async).delay(1.0).max_tries(5).run_async()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, Generic, TypeAlias, TypeVar

from pydantic import ValidationError

from attempt.config import get_settings
from attempt.errors import ConfigurationError

from .backoff import (
    ConstantBackoff,
    FunctionBackoff,
    GrowthBackoff,
    NoDelay,
    as_magnitude,
    as_seconds,
    initial_delay,
)
from .executor import execute, execute_async
from .policy import AttemptPolicy, RetryCallback

if TYPE_CHECKING:
    from attempt.errors import Result

    from .backoff import DelayFn, Duration

T = TypeVar("T")
E = TypeVar("E")

Operation: TypeAlias = Callable[[], "Result[T, E]"]
AsyncOperation: TypeAlias = Callable[[], Awaitable["Result[T, E]"]]


class Attempt(Generic[T, E]):
    """Immutable builder that accumulates a retry policy.
    
    Every configuration method returns a new Attempt, so a partially
    configured builder can be shared and extended safely. The policy is
    validated on each step, so an invalid value raises ConfigurationError
    at the call that introduced it.
    
    A builder (and the policy it holds) may be run any number of times;
    each run starts again from attempt 1 with no memory of earlier runs.
    """
    
    __slots__ = ("_policy",)
    
    def __init__(self, policy: AttemptPolicy) -> None:
        self._policy = policy
    
    @classmethod
    def to(cls, operation: Operation[T, E] | AsyncOperation[T, E]) -> Attempt[T, E]:
        """Start configuring retries for `operation`.
        
        Defaults come from settings: 10 max tries and a delay of 500ms that
        grows by 25% after each retry.
        
        Raises:
            ConfigurationError: If an ATTEMPT_* environment variable is invalid
        """
        try:
            settings = get_settings()
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(e) from e
        return cls(AttemptPolicy.build(
            operation=operation,
            max_tries=settings.max_tries,
            backoff=GrowthBackoff(settings.initial_delay, settings.delay_growth),
        ))
    
    @classmethod
    def infinitely(cls, operation: Operation[T, E]) -> T:
        """Retry `operation` with no attempt ceiling and return its success value.
        
        Uses the default delay schedule. If the operation never succeeds the
        calling thread is blocked forever.
        """
        return cls.to(operation).no_max_tries().run().expect("unbounded retry returned Err")
    
    @classmethod
    async def infinitely_async(cls, operation: Operation[T, E] | AsyncOperation[T, E]) -> T:
        """Async counterpart of infinitely; stops only on success or cancellation."""
        result = await cls.to(operation).no_max_tries().run_async()
        return result.expect("unbounded retry returned Err")
    
    def _with(self, **changes: object) -> Attempt[T, E]:
        current = {name: getattr(self._policy, name) for name in AttemptPolicy.model_fields}
        return type(self)(AttemptPolicy.build(**{**current, **changes}))
    
    # ─── Delay ───────────────────────────────────────────────────────────
    
    def delay(self, delay: Duration | DelayFn) -> Attempt[T, E]:
        """Wait a fixed duration before every retry, replacing any earlier delay.
        
        Accepts seconds or a timedelta. A callable is treated as a per-attempt
        function: it receives the 1-indexed failed attempt and returns the
        duration to wait.
        
        Any growth set earlier with delay_growth_magnitude is discarded; call
        delay_growth_magnitude after delay to grow from this value.
        """
        if callable(delay):
            return self._with(backoff=FunctionBackoff(delay))
        return self._with(backoff=ConstantBackoff(as_seconds(delay)))
    
    def no_delay(self) -> Attempt[T, E]:
        """Retry immediately after a failure."""
        return self._with(backoff=NoDelay())
    
    def delay_growth_magnitude(self, magnitude: float) -> Attempt[T, E]:
        """Multiply the delay by `magnitude` after each retry.
        
        The current first delay is kept as the starting point: with a 1s
        delay and magnitude 2.0 the waits are 1s, 2s, 4s, ...
        
        Order matters: a later delay() or no_delay() replaces the whole
        schedule, so set the delay first and the magnitude after it.
        
        Raises:
            ConfigurationError: If magnitude is not a finite number above zero
        """
        growth = as_magnitude(magnitude)
        return self._with(backoff=GrowthBackoff(initial_delay(self._policy.backoff), growth))
    
    # ─── Attempt Ceiling ─────────────────────────────────────────────────
    
    def max_tries(self, max_tries: int) -> Attempt[T, E]:
        """Give up after `max_tries` attempts. Must be an int >= 1."""
        return self._with(max_tries=max_tries)
    
    def no_max_tries(self) -> Attempt[T, E]:
        """Remove the attempt ceiling. Can loop forever and hammer third-party APIs."""
        return self._with(max_tries=None)
    
    # ─── Hooks & Labels ──────────────────────────────────────────────────
    
    def on_retry(self, callback: RetryCallback) -> Attempt[T, E]:
        """Call `callback(attempt, error, delay)` after each failure that will be retried."""
        return self._with(on_retry=callback)
    
    def named(self, name: str) -> Attempt[T, E]:
        """Label used in log lines instead of the operation's qualname."""
        return self._with(name=name)
    
    # ─── Execution ───────────────────────────────────────────────────────
    
    @property
    def policy(self) -> AttemptPolicy:
        return self._policy
    
    def run(self) -> Result[T, E]:
        """Run on the calling thread, sleeping between attempts.
        
        Returns:
            Ok(value) on success, or Err(last_error) once max_tries attempts failed
        """
        return execute(self._policy)
    
    async def run_async(self) -> Result[T, E]:
        """Run inside the current task, suspending between attempts.
        
        Cancelling the task while it waits on the operation or the delay
        raises asyncio.CancelledError here; it is never reported as Err.
        """
        return await execute_async(self._policy)
    
    def __repr__(self) -> str:
        p = self._policy
        return f"Attempt({p.label}, max_tries={p.max_tries}, backoff={p.backoff!r})"


to = Attempt.to
infinitely = Attempt.infinitely
infinitely_async = Attempt.infinitely_async
