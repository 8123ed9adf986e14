"""Delay schedules applied between attempts.

Provides pluggable, deterministic delay calculation:
- NoDelay: Retry immediately
- ConstantBackoff: Same delay before every retry
- GrowthBackoff: Geometric growth from an initial delay (the default schedule)
- FunctionBackoff: Caller-computed delay per attempt

Attempt numbers are 1-indexed and name the attempt that just failed, so
delay(1) is the wait between the first and second attempts.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Annotated, Callable, Protocol, TypeAlias, runtime_checkable

from pydantic import Field, TypeAdapter, ValidationError

from attempt.errors import ConfigurationError

Duration: TypeAlias = float | int | timedelta
DelayFn: TypeAlias = Callable[[int], Duration]

DEFAULT_INITIAL_DELAY = 0.5
DEFAULT_DELAY_GROWTH = 1.25
DEFAULT_MAX_DELAY = 3600.0

_seconds_adapter: TypeAdapter[float] = TypeAdapter(Annotated[float, Field(ge=0.0, allow_inf_nan=False, strict=True)])
_magnitude_adapter: TypeAdapter[float] = TypeAdapter(Annotated[float, Field(gt=0.0, allow_inf_nan=False, strict=True)])


def _validate(adapter: TypeAdapter[float], raw: object, value: object, field: str) -> float:
    if isinstance(raw, bool):
        raise ConfigurationError(f"Invalid retry configuration - {field}: expected a number, got bool", field=field)
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid retry configuration - {field}: {e.errors(include_url=False)[0]['msg']} (got {value!r})",
            field=field,
        ) from e


def as_seconds(value: Duration, *, field: str = "delay") -> float:
    """Normalize a duration (seconds or timedelta) to non-negative float seconds.
    
    Raises:
        ConfigurationError: If the duration is negative, NaN or infinite
    """
    raw = value.total_seconds() if isinstance(value, timedelta) else value
    return _validate(_seconds_adapter, raw, value, field)


def as_magnitude(value: float, *, field: str = "delay_growth_magnitude") -> float:
    """Validate a growth factor: a finite number greater than zero.
    
    Raises:
        ConfigurationError: If the factor is zero, negative, NaN or infinite
    """
    return _validate(_magnitude_adapter, value, value, field)


@runtime_checkable
class Backoff(Protocol):
    """Protocol for delay calculation between attempts."""
    
    def delay(self, attempt: int) -> float:
        """Seconds to wait after the given (1-indexed) failed attempt."""
        ...


@dataclass(frozen=True, slots=True)
class NoDelay:
    """Retry immediately; the blocking executor does not sleep at all."""
    
    def delay(self, attempt: int) -> float:
        return 0.0


@dataclass(frozen=True, slots=True)
class ConstantBackoff:
    """Fixed delay between retries.
    
    Attributes:
        delay_seconds: Fixed delay in seconds
    """
    
    delay_seconds: float
    
    def delay(self, attempt: int) -> float:
        return self.delay_seconds


@dataclass(frozen=True, slots=True)
class GrowthBackoff:
    """Geometric backoff without jitter.
    
    Delay = initial * (magnitude ^ (attempt - 1))
    
    With the defaults this yields 0.5s, 0.625s, 0.78125s, ... so a ten-try
    run waits roughly 12.9s in total across its nine delays. Each delay is
    capped at max_delay, which also keeps unbounded runs from overflowing.
    
    Attributes:
        initial: First delay in seconds (default: 0.5)
        magnitude: Growth factor per retry (default: 1.25)
        max_delay: Upper bound for any single delay (default: 1 hour)
    """
    
    initial: float = DEFAULT_INITIAL_DELAY
    magnitude: float = DEFAULT_DELAY_GROWTH
    max_delay: float = DEFAULT_MAX_DELAY
    
    def delay(self, attempt: int) -> float:
        if self.initial == 0.0:
            return 0.0
        try:
            return min(self.initial * (self.magnitude ** (attempt - 1)), self.max_delay)
        except OverflowError:
            return self.max_delay


@dataclass(frozen=True, slots=True)
class FunctionBackoff:
    """Per-attempt delay computed by a caller-supplied function.
    
    The function receives the 1-indexed failed attempt and may return
    seconds or a timedelta.
    """
    
    fn: DelayFn
    
    def delay(self, attempt: int) -> float:
        return as_seconds(self.fn(attempt))


def initial_delay(backoff: Backoff) -> float:
    """Delay before the second attempt; the base for growth schedules."""
    return backoff.delay(1)
