"""tuplesmith error handling module.

Provides the exception hierarchy with error codes and call context.
"""

from tuplesmith.errors.base import (
    AlphabetError,
    ConfigValidationError,
    EmptyPartError,
    ErrorCode,
    ErrorContext,
    InvalidParameterError,
    NumericRangeError,
    SpectrumLimitError,
    SubsetSizeError,
    TuplesmithError,
    ValidationError,
)

__all__ = [
    # Base exceptions
    "TuplesmithError",
    "ErrorCode",
    "ErrorContext",
    # Validation errors
    "ValidationError",
    "InvalidParameterError",
    "EmptyPartError",
    "SubsetSizeError",
    "AlphabetError",
    "ConfigValidationError",
    # Numeric errors
    "NumericRangeError",
    "SpectrumLimitError",
]
