"""Attempt - retry fallible operations with a fluent, declarative policy.

Wraps a zero-argument operation returning Ok(value) or Err(error) and
re-invokes it until it succeeds or the attempt budget runs out. Works for
blocking callables and for coroutine functions alike.

Quick Start:
    >>> from attempt import Attempt, Ok, Err
    >>>
    >>> def fetch() -> Result[bytes, str]:
    ...     ...
    >>>
    >>> # 10 tries, 500ms delay growing 25% per retry
    >>> res = Attempt.to(fetch).run()
    >>>
    >>> # Fixed delay, custom ceiling
    >>> res = Attempt.to(fetch).delay(1.0).max_tries(1000).run()
    >>> if res.is_err():
    ...     print("gave up:", res.unwrap_err())  # last failure only
    >>>
    >>> # Suspendable, for use inside an event loop
    >>> res = await Attempt.to(fetch_async).run_async()
    >>>
    >>> # Never gives up - be careful
    >>> data = Attempt.infinitely(fetch)

Raising Callables:
    >>> from attempt import try_fn
    >>> res = Attempt.to(try_fn(lambda: urlopen(url).read(), OSError)).run()
"""

from .config import AttemptSettings, clear_settings_cache, get_settings
from .errors import (
    AttemptError,
    ConfigurationError,
    Err,
    Ok,
    OperationContractError,
    Result,
    try_fn,
    try_fn_async,
)
from .retry import (
    DEFAULT_DELAY_GROWTH,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_TRIES,
    Attempt,
    AttemptPolicy,
    Backoff,
    ConstantBackoff,
    FunctionBackoff,
    GrowthBackoff,
    NoDelay,
    infinitely,
    infinitely_async,
    to,
)

__version__ = "0.1.0"

__all__ = [
    # Builder & shortcuts
    "Attempt", "to", "infinitely", "infinitely_async",
    # Policy & schedules
    "AttemptPolicy", "Backoff", "NoDelay", "ConstantBackoff", "GrowthBackoff", "FunctionBackoff",
    "DEFAULT_MAX_TRIES", "DEFAULT_INITIAL_DELAY", "DEFAULT_DELAY_GROWTH",
    # Results & errors
    "Result", "Ok", "Err", "try_fn", "try_fn_async",
    "AttemptError", "ConfigurationError", "OperationContractError",
    # Settings
    "AttemptSettings", "get_settings", "clear_settings_cache",
]
