"""trypy: composable results for computations that may fail.

Public API:
    - Result: Success or Failure, with map/flat_map/filter/recover/... combinators
    - Result.to(): run a fallible callable and capture its outcome
    - safe(): decorator turning a raising function into a Result-returning one
    - sequence() / partition(): collect many results
    - config_scope(): scoped reporting configuration
"""

from __future__ import annotations

import logging

from trypy.config import Config, config_scope, resolve_config
from trypy.errors import (
    ConfigurationError,
    NoSuchElementError,
    PreconditionError,
    ResultUnwrapError,
    TrypyError,
    UnsupportedOperationError,
)
from trypy.functions import (
    ThrowingFunction,
    ThrowingPredicate,
    ThrowingSupplier,
    both,
    either,
    negate,
)
from trypy.helpers import partition, safe, sequence
from trypy.result import Failure, Result, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("trypy")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("trypy").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Failure",
    "NoSuchElementError",
    "PreconditionError",
    "Result",
    "ResultUnwrapError",
    "Success",
    "ThrowingFunction",
    "ThrowingPredicate",
    "ThrowingSupplier",
    "TrypyError",
    "UnsupportedOperationError",
    "both",
    "config_scope",
    "either",
    "negate",
    "partition",
    "resolve_config",
    "safe",
    "sequence",
]
