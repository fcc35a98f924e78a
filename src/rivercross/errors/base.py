"""Custom exception hierarchy for rivercross.

All rivercross errors inherit from RiverCrossError and include:
- error_code: A unique ErrorCode enum for categorization
- context: ErrorContext with the state/strategy involved
- suggestions: List of actionable steps to resolve the issue

Dead ends (a state where cannibals outnumber missionaries) and an exhausted
search are normal outcomes and never raised as errors.

Example:
    try:
        state = parse_state("0 0 2 3 right")
    except InvalidTotalError as e:
        print(f"Error: {e}")
        print(f"Suggestions: {e.suggestions}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for rivercross.

    Error codes are organized by category:
    - E2xx: Validation errors (state construction, parsing, config)
    - E4xx: Search errors
    - E9xx: Unknown/internal errors
    """

    # Validation errors (E2xx)
    VALIDATION_FAILED = "E200"
    INVALID_TOTAL = "E201"
    INVALID_CONFIG = "E202"
    PARSE_FAILED = "E203"

    # Search errors (E4xx)
    SEARCH_FAILED = "E401"
    PROVENANCE_CYCLE = "E402"

    # Unknown/internal errors (E9xx)
    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if 200 <= code_num < 300:
            return "validation"
        elif 400 <= code_num < 500:
            return "search"
        else:
            return "unknown"


@dataclass
class ErrorContext:
    """Structured context for error logging and debugging.

    Attributes:
        state: Canonical key of the state being processed (if any)
        strategy: Name of the active search strategy (if any)
        text: Raw input text that failed to parse (if any)
        extra: Additional context-specific information
        timestamp: When the error occurred
    """

    state: str | None = None
    strategy: str | None = None
    text: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "state": self.state,
            "strategy": self.strategy,
            "text": self.text,
            "extra": self.extra,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the error location as a readable string."""
        parts = []
        if self.strategy:
            parts.append(f"strategy={self.strategy}")
        if self.state:
            parts.append(f"state={self.state!r}")
        if self.text is not None:
            parts.append(f"input={self.text!r}")
        return " > ".join(parts) if parts else "unknown location"


class RiverCrossError(Exception):
    """Base exception for all rivercross errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with execution details
        suggestions: List of actionable steps to resolve the issue
        recoverable: Whether the caller can reasonably retry
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
        recoverable: bool = False,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self.recoverable = recoverable
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
            "recoverable": self.recoverable,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class ValidationError(RiverCrossError):
    """Input failed validation."""

    error_code = ErrorCode.VALIDATION_FAILED
    default_message = "Validation failed"


class InvalidTotalError(ValidationError):
    """A state's per-resource totals do not match the world totals.

    Raised by state construction. Never recoverable: the configuration
    itself is impossible in this world.
    """

    error_code = ErrorCode.INVALID_TOTAL
    default_message = "Impossible number of people on the two banks"
    default_suggestions = [
        "Each resource must sum to the world total across both banks",
        "Counts must be non-negative",
    ]

    def __init__(
        self,
        resource: str,
        total: int,
        expected: int,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.resource = resource
        self.total = total
        self.expected = expected
        if message is None:
            message = f"Impossible number of {resource}: {total} (expected {expected})"
        super().__init__(message=message, **kwargs)


class ParseError(ValidationError):
    """Malformed initial-state text."""

    error_code = ErrorCode.PARSE_FAILED
    default_message = "Could not parse state"
    default_suggestions = [
        "Use five whitespace-separated tokens: "
        "<left cannibals> <left missionaries> <right cannibals> <right missionaries> <left|right>",
        "Example: '0 0 3 3 right'",
    ]

    def __init__(self, message: str | None = None, text: str | None = None, **kwargs: Any) -> None:
        self.text = text
        context = kwargs.pop("context", None) or ErrorContext(text=text)
        super().__init__(message=message, context=context, **kwargs)


class ConfigValidationError(ValidationError):
    """Configuration value is invalid."""

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid configuration"
    default_suggestions = [
        "Check rivercross.yaml and RIVERCROSS_* environment variables",
    ]

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message=message, **kwargs)
        if field is not None:
            self.context.extra.setdefault("field", field)


class SearchError(RiverCrossError):
    """The search driver was misused or hit an internal inconsistency."""

    error_code = ErrorCode.SEARCH_FAILED
    default_message = "Search failed"


class ProvenanceCycleError(SearchError):
    """Path reconstruction did not reach the root in the expected number of steps.

    Indicates a bug in successor generation or graph bookkeeping.
    """

    error_code = ErrorCode.PROVENANCE_CYCLE
    default_message = "Provenance chain does not terminate at the root"
    default_suggestions = [
        "This is an internal bug; please report the initial state and strategy",
    ]
