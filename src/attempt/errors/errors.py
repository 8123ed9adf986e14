"""Exceptions raised by the retry engine itself.

Operation failures are never raised: they travel as Err values. The
exceptions here cover misuse of the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from pydantic import ValidationError


class AttemptError(Exception):
    """Base class for errors raised by attempt."""


class ConfigurationError(AttemptError, ValueError):
    """Invalid retry configuration, raised while building, before any attempt runs."""

    __slots__ = ("field",)

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> Self:
        """Flatten a pydantic ValidationError into a single readable message."""
        errors = exc.errors(include_url=False)
        parts = [f"{'.'.join(str(p) for p in e['loc']) or 'value'}: {e['msg']}" for e in errors]
        field = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
        return cls(f"Invalid retry configuration - {'; '.join(parts)}", field=field)


class OperationContractError(AttemptError, TypeError):
    """An operation returned something other than a Result."""

    __slots__ = ("operation", "returned")

    def __init__(self, operation: str, returned: object, *, hint: str | None = None) -> None:
        self.operation = operation
        self.returned = returned
        message = f"[{operation}] operation must return Ok(...) or Err(...), got {type(returned).__name__}"
        super().__init__(f"{message}; {hint}" if hint else message)
