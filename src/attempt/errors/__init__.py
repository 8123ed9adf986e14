"""Error handling for attempt.

- Result/Ok/Err: outcome of a single attempt and of a whole run
- try_fn/try_fn_async: adapt raising callables into Result-returning operations
- AttemptError/ConfigurationError/OperationContractError: engine misuse
"""

from .errors import AttemptError, ConfigurationError, OperationContractError
from .result import Err, Ok, Result, try_fn, try_fn_async

__all__ = [
    # Result type
    "Result", "Ok", "Err", "try_fn", "try_fn_async",
    # Exceptions
    "AttemptError", "ConfigurationError", "OperationContractError",
]
