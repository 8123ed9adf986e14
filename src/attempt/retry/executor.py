"""Attempt loop with blocking and suspendable drivers.

AttemptLoop owns the per-run state (attempt counter) and decides, after
each result, whether to stop or how long to wait. The two drivers only
differ in how they invoke the operation and how they wait:

- execute: calls the operation and sleeps with time.sleep
- execute_async: awaits the operation and sleeps with asyncio.sleep

Cancellation (asyncio.CancelledError) raised while awaiting the operation
or the delay propagates untouched and no further attempt is started.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from attempt.errors import OperationContractError, Result

if TYPE_CHECKING:
    from .policy import AttemptPolicy

T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger("attempt.retry")


@dataclass(slots=True)
class AttemptLoop:
    """Per-run loop state shared by both drivers.
    
    Attributes:
        policy: Policy being executed
        attempt: 1-indexed number of the attempt currently in flight
    """
    
    policy: AttemptPolicy
    attempt: int = 1
    
    def check(self, result: object) -> Result[object, object]:
        """Reject operation return values that are not a Result."""
        if not isinstance(result, Result):
            raise OperationContractError(self.policy.label, result)
        return result
    
    def settle(self, result: Result[object, object]) -> float | None:
        """Record an attempt's result.
        
        Returns:
            Seconds to wait before the next attempt, or None when the result
            is terminal (success, or failure with the budget exhausted)
        """
        policy = self.policy
        if result.is_ok():
            if self.attempt > 1:
                logger.debug(f"[{policy.label}] Succeeded on attempt {self.attempt}")
            return None
        
        error = result.unwrap_err()
        if policy.exhausted(self.attempt):
            logger.warning(f"[{policy.label}] Giving up after {self.attempt} attempts: {error}")
            return None
        
        delay = policy.delay_for(self.attempt)
        logger.info(
            f"[{policy.label}] Attempt {self.attempt}/{policy.max_tries or '∞'} failed: {error}. "
            f"Retrying in {delay:.2f}s"
        )
        if policy.on_retry:
            policy.on_retry(self.attempt, error, delay)
        self.attempt += 1
        return delay


async def checkpoint() -> None:
    """Cooperative cancellation checkpoint: yield once to the event loop."""
    await asyncio.sleep(0)


def execute(policy: AttemptPolicy) -> Result[T, E]:
    """Run the attempt loop on the calling thread, blocking during delays.
    
    Returns:
        Ok(value) from the first successful attempt, or Err(last_error)
        once max_tries attempts have failed
    """
    loop = AttemptLoop(policy)
    while True:
        outcome = policy.operation()
        if inspect.iscoroutine(outcome):
            outcome.close()
            raise OperationContractError(policy.label, outcome, hint="use run_async() for coroutine functions")
        result = loop.check(outcome)
        if (delay := loop.settle(result)) is None:
            return result  # type: ignore[return-value]
        if delay > 0:
            time.sleep(delay)


async def execute_async(policy: AttemptPolicy) -> Result[T, E]:
    """Run the attempt loop inside the current task, suspending during delays.
    
    The operation may be a coroutine function or a plain callable returning
    a Result; awaitable return values are awaited. Same outcome contract as
    execute.
    """
    loop = AttemptLoop(policy)
    while True:
        outcome = policy.operation()
        if inspect.isawaitable(outcome):
            outcome = await outcome
        result = loop.check(outcome)
        if (delay := loop.settle(result)) is None:
            return result  # type: ignore[return-value]
        await asyncio.sleep(delay)
        await checkpoint()
