"""Custom exception hierarchy for tuplesmith.

tuplesmith provides a small error hierarchy with:
- Structured error codes for programmatic handling
- Context describing the failing operation and its arguments
- Actionable suggestions for recovery

All tuplesmith errors inherit from TuplesmithError and include:
- error_code: A unique ErrorCode enum for categorization
- context: ErrorContext with operation/parameter details
- suggestions: List of actionable steps to resolve the issue

Only construction and validation failures raise. Pure numeric helpers keep
their sentinel return values (-1, None, empty list) and exhausted
enumerators return None.

Example:
    try:
        Combination(range(1, 6), k=7)
    except SubsetSizeError as e:
        print(f"Error: {e}")
        print(f"Suggestions: {e.suggestions}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for tuplesmith.

    Error codes are organized by category:
    - E2xx: Validation errors
    - E3xx: Numeric range errors
    - E9xx: Unknown/internal errors
    """

    # Validation errors (E2xx)
    VALIDATION_FAILED = "E201"
    INVALID_CONFIG = "E202"
    INVALID_PARAMETER = "E203"
    EMPTY_PART = "E204"
    SUBSET_SIZE = "E205"
    ALPHABET_MISMATCH = "E206"

    # Numeric range errors (E3xx)
    NUMERIC_RANGE = "E301"
    SPECTRUM_LIMIT = "E302"

    # Unknown/internal errors (E9xx)
    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if code_num < 200:
            return "unknown"
        elif code_num < 300:
            return "validation"
        elif code_num < 400:
            return "numeric"
        else:
            return "unknown"


@dataclass
class ErrorContext:
    """Structured context for error logging and debugging.

    Attributes:
        operation: Name of the failing operation (e.g. "Combination").
        parameters: Arguments the operation was called with.
        extra: Additional context-specific information.
        timestamp: When the error occurred.
    """

    operation: str | None = None
    parameters: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "operation": self.operation,
            "parameters": {k: repr(v) for k, v in self.parameters.items()},
            "extra": self.extra,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the failing call as a readable string."""
        if not self.operation:
            return "unknown location"
        args = ", ".join(f"{k}={v!r}" for k, v in self.parameters.items())
        return f"{self.operation}({args})"


class TuplesmithError(Exception):
    """Base exception for all tuplesmith errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with call details
        suggestions: List of actionable steps to resolve the issue
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        parts = [f"[{self.error_code.value}] {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            parts.append(f"at {location}")

        return " | ".join(parts)

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [
            f"Error [{self.error_code.value}]: {self.message}",
            "",
        ]

        location = self.context.format_location()
        if location != "unknown location":
            lines.append(f"Location: {location}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class ValidationError(TuplesmithError):
    """Validation failed.

    An argument or configuration value was rejected. Check the 'field'
    and 'value' attributes for what failed validation.
    """

    error_code = ErrorCode.VALIDATION_FAILED
    default_message = "Validation failed"
    default_suggestions = [
        "Check the field name and value mentioned in the error",
    ]

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(message=message, **kwargs)

    def __str__(self) -> str:
        base = super().__str__()
        if self.field:
            base = f"{base} (field: {self.field})"
        return base

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        result["value"] = repr(self.value)
        if self.expected:
            result["expected"] = self.expected
        return result


class InvalidParameterError(ValidationError, ValueError):
    """A constructor or function argument is out of its legal domain."""

    error_code = ErrorCode.INVALID_PARAMETER
    default_message = "Invalid parameter"
    default_suggestions = [
        "Check the parameter against the documented range",
    ]


class EmptyPartError(InvalidParameterError):
    """A Cartesian product part holds no value.

    A zero-length part makes the product empty, so no cursor can be
    positioned on it.
    """

    error_code = ErrorCode.EMPTY_PART
    default_message = "CartesianProduct parts cannot be empty"
    default_suggestions = [
        "Remove the empty part or give it at least one value",
    ]


class SubsetSizeError(InvalidParameterError):
    """Subset size k is outside [1, n]."""

    error_code = ErrorCode.SUBSET_SIZE
    default_message = "Subset size must satisfy 1 <= k <= n"
    default_suggestions = [
        "Pick k between 1 and the universe size",
    ]


class AlphabetError(ValidationError):
    """A symbol cannot be mapped between alphabets.

    Raised by translation, which never drops or fabricates symbols.
    """

    error_code = ErrorCode.ALPHABET_MISMATCH
    default_message = "Symbol not found in the origin alphabet"
    default_suggestions = [
        "Make sure every tuple element belongs to the origin alphabet",
        "Origin and target alphabets must have the same length",
    ]


class ConfigValidationError(ValidationError):
    """Configuration validation failed."""

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid configuration"
    default_suggestions = [
        "Check tuplesmith.yaml syntax with a YAML linter",
        "Check TUPLESMITH_* environment variables",
    ]


class NumericRangeError(TuplesmithError):
    """A computation would exceed a representable or configured range."""

    error_code = ErrorCode.NUMERIC_RANGE
    default_message = "Value outside of the supported numeric range"


class SpectrumLimitError(NumericRangeError):
    """Gap spectrum would enumerate more sub-subsets than allowed."""

    error_code = ErrorCode.SPECTRUM_LIMIT
    default_message = "Too many sub-subsets to enumerate"
    default_suggestions = [
        "Lower the guarantee size or shorten the tuple",
        "Raise spectrum_limit (0 disables the limit)",
    ]

    def __init__(
        self,
        message: str | None = None,
        subsets: int = 0,
        limit: int = 0,
        **kwargs: Any,
    ) -> None:
        self.subsets = subsets
        self.limit = limit
        super().__init__(message=message, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["subsets"] = self.subsets
        result["limit"] = self.limit
        return result
