"""rivercross error handling.

- Custom exception hierarchy with error codes
- Structured context for debugging
- Troubleshooting suggestions for common errors
"""

from rivercross.errors.base import (
    ConfigValidationError,
    ErrorCode,
    ErrorContext,
    InvalidTotalError,
    ParseError,
    ProvenanceCycleError,
    RiverCrossError,
    SearchError,
    ValidationError,
)

__all__ = [
    # Base exceptions
    "RiverCrossError",
    "ErrorCode",
    "ErrorContext",
    # Validation errors
    "ValidationError",
    "InvalidTotalError",
    "ParseError",
    "ConfigValidationError",
    # Search errors
    "SearchError",
    "ProvenanceCycleError",
]
