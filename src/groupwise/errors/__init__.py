"""groupwise error handling.

Provides the exception hierarchy with error codes and structured context.
"""

from groupwise.errors.base import (
    ConfigValidationError,
    ErrorCode,
    ErrorContext,
    GroupNotFoundError,
    GroupwiseError,
    InvalidMemberError,
    InvalidSizeError,
    StoreError,
    SubgroupNotFoundError,
    ValidationError,
)

__all__ = [
    # Base exceptions
    "GroupwiseError",
    "ErrorCode",
    "ErrorContext",
    # Validation errors
    "ValidationError",
    "InvalidSizeError",
    "InvalidMemberError",
    "ConfigValidationError",
    # Storage errors
    "StoreError",
    "GroupNotFoundError",
    # Schedule bookkeeping errors
    "SubgroupNotFoundError",
]
