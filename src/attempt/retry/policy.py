"""Retry policy: the immutable configuration of one retry session.

A policy carries the operation to invoke, the attempt ceiling and the
delay schedule. It is validated once when built, so misconfiguration
fails before any attempt is made.

Optimizations:
- Frozen for immutability (safe to share and to run repeatedly)
- Strict validation of the attempt ceiling (no bool/float coercion)
"""

from __future__ import annotations

from typing import Annotated, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from attempt.errors import ConfigurationError

from .backoff import Backoff, GrowthBackoff

DEFAULT_MAX_TRIES = 10

RetryCallback = Callable[[int, object, float], None]


class AttemptPolicy(BaseModel):
    """Validated configuration for one retry session.
    
    Attributes:
        operation: Zero-argument callable returning a Result (or an awaitable of one)
        max_tries: Attempt ceiling, or None for unbounded
        backoff: Delay schedule between attempts
        on_retry: Optional callback(attempt, error, delay) fired before each wait
        name: Label used in log lines (defaults to the operation's qualname)
    
    Example:
        >>> policy = AttemptPolicy.build(operation=fetch, max_tries=3)
        >>> policy.delay_for(1)
        0.5
    """
    
    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # For Backoff protocol
        extra="forbid",
        revalidate_instances="never",
    )
    
    operation: Callable[[], object] = Field(repr=False)
    max_tries: Annotated[int, Field(ge=1, strict=True)] | None = DEFAULT_MAX_TRIES
    backoff: Backoff = Field(default_factory=GrowthBackoff)
    on_retry: RetryCallback | None = Field(default=None, exclude=True, repr=False)
    name: str | None = None
    
    @classmethod
    def build(cls, **fields: object) -> AttemptPolicy:
        """Construct a policy, reporting invalid fields as ConfigurationError."""
        try:
            return cls(**fields)
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(e) from e
    
    @computed_field
    @property
    def is_bounded(self) -> bool:
        """Whether the policy gives up after max_tries attempts."""
        return self.max_tries is not None
    
    @property
    def label(self) -> str:
        if self.name:
            return self.name
        return getattr(self.operation, "__qualname__", None) or type(self.operation).__name__
    
    def exhausted(self, attempt: int) -> bool:
        """Whether `attempt` (1-indexed) was the last one the budget allows."""
        return self.max_tries is not None and attempt >= self.max_tries
    
    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after failed `attempt` before the next one."""
        return self.backoff.delay(attempt)
