"""Retry engine: policy, delay schedules, builder and executors.

Example:
    >>> from attempt.retry import Attempt, GrowthBackoff
    >>> Attempt.to(flaky).delay(0.1).delay_growth_magnitude(2.0).max_tries(5).run()
"""

from .backoff import (
    DEFAULT_DELAY_GROWTH,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_DELAY,
    Backoff,
    ConstantBackoff,
    FunctionBackoff,
    GrowthBackoff,
    NoDelay,
    as_magnitude,
    as_seconds,
)
from .builder import Attempt, infinitely, infinitely_async, to
from .executor import AttemptLoop, execute, execute_async
from .policy import DEFAULT_MAX_TRIES, AttemptPolicy

__all__ = [
    # Delay schedules
    "Backoff", "NoDelay", "ConstantBackoff", "GrowthBackoff", "FunctionBackoff", "as_seconds", "as_magnitude",
    "DEFAULT_INITIAL_DELAY", "DEFAULT_DELAY_GROWTH", "DEFAULT_MAX_DELAY",
    # Policy
    "AttemptPolicy", "DEFAULT_MAX_TRIES",
    # Execution
    "AttemptLoop", "execute", "execute_async",
    # Builder
    "Attempt", "to", "infinitely", "infinitely_async",
]
