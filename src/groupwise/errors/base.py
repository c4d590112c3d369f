"""Exception hierarchy for groupwise.

Every error raised on purpose by groupwise derives from GroupwiseError and
carries three things besides its message:

- an ErrorCode, so callers and the CLI can tell failures apart
- an ErrorContext naming the operation (and group) that failed
- a list of suggestions a person can act on

Out-of-range sizes given to the dispatcher or to the combination generator
are not errors; they yield an empty result. Only contract violations, such
as asking the strict pairs scheduler for triples, raise.

Example:
    try:
        round_robin_subgroups(members, 3)
    except InvalidSizeError as e:
        print(e.format_verbose())
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

_CATEGORIES = {
    "2": "validation",
    "3": "storage",
    "4": "schedule",
}


class ErrorCode(Enum):
    """Error codes, grouped by their first digit.

    - E2xx: bad input or configuration
    - E3xx: group store failures
    - E4xx: schedule bookkeeping
    - E999: anything else
    """

    # Input and configuration (E2xx)
    VALIDATION_FAILED = "E201"
    INVALID_SIZE = "E202"
    INVALID_MEMBER = "E203"
    INVALID_CONFIG = "E204"

    # Group store (E3xx)
    STORE_FAILED = "E301"
    GROUP_NOT_FOUND = "E302"

    # Schedule bookkeeping (E4xx)
    SUBGROUP_NOT_FOUND = "E401"

    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        return _CATEGORIES.get(self.value[1], "unknown")


@dataclass
class ErrorContext:
    """Where an error happened.

    Attributes:
        group_id: Group being read or changed, when there is one.
        operation: Short name of the failing operation, e.g. ``"save"``.
        extra: Free-form details such as the offending size or file path.
        timestamp: Creation time of the context.
    """

    group_id: str | None = None
    operation: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return {key: value for key, value in data.items() if value is not None}

    def format_location(self) -> str:
        """``operation=... > group=...``, or "unknown location" when empty."""
        parts = [
            f"{label}={value}"
            for label, value in (("operation", self.operation), ("group", self.group_id))
            if value
        ]
        return " > ".join(parts) or "unknown location"


class GroupwiseError(Exception):
    """Base class for groupwise errors.

    Subclasses set ``error_code``, ``default_message`` and
    ``default_suggestions``; any of them can be overridden per instance.
    Extra keyword arguments are merged into ``context.extra``.

    Attributes:
        message: What went wrong, in one sentence
        error_code: ErrorCode of this failure
        context: ErrorContext describing where it happened
        cause: Exception that triggered this one, if any
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "Unexpected groupwise error"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        suggestions: list[str] | None = None,
        **extra: Any,
    ) -> None:
        self.message = message or self.default_message
        if error_code is not None:
            self.error_code = error_code
        self.context = context if context is not None else ErrorContext()
        self.context.extra.update(extra)
        self.cause = cause
        self._suggestions = suggestions
        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        if self._suggestions is None:
            return list(self.default_suggestions)
        return self._suggestions

    @property
    def _location(self) -> str | None:
        location = self.context.format_location()
        return None if location == "unknown location" else location

    def __str__(self) -> str:
        text = f"[{self.error_code.value}] {self.message}"
        if self._location:
            text += f" | at {self._location}"
        return text

    def format_verbose(self) -> str:
        """Multi-line description with location and suggestions, for terminals."""
        lines = [f"Error [{self.error_code.value}]: {self.message}"]
        if self._location:
            lines.append(f"Location: {self._location}")
        if self.suggestions:
            lines += ["", "Suggestions:"]
            lines += [f"  - {hint}" for hint in self.suggestions]
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code.value,
            "category": self.error_code.category,
            "error_type": type(self).__name__,
            "message": self.message,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": None if self.cause is None else str(self.cause),
        }


class ValidationError(GroupwiseError):
    """Input was rejected."""

    error_code = ErrorCode.VALIDATION_FAILED
    default_message = "Invalid input"


class InvalidSizeError(ValidationError):
    """A scheduler was asked for a group size it does not support.

    Raised by the strict pairs scheduler for any size other than 2. This is
    a programming error in the caller, not a data problem, and is never
    recovered from inside groupwise.
    """

    error_code = ErrorCode.INVALID_SIZE
    default_message = "Only pairwise round-robin (subgroup size 2) is supported"
    default_suggestions = [
        "Use generate_schedule() to schedule groups of any size",
        "Pass size=2 to round_robin_subgroups()",
    ]


class InvalidMemberError(ValidationError):
    """A member name was empty after trimming."""

    error_code = ErrorCode.INVALID_MEMBER
    default_message = "Member name cannot be empty"
    default_suggestions = ["Provide a non-blank member name"]


class ConfigValidationError(ValidationError):
    """A setting in groupwise.yaml or a GROUPWISE_* variable is invalid.

    Attributes:
        field: Name of the offending setting, when known
        value: The rejected value
    """

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid groupwise configuration"
    default_suggestions = [
        "Check groupwise.yaml for typos",
        "Check GROUPWISE_* environment variables",
    ]

    def __init__(self, message: str | None = None, field: str | None = None, value: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
        if field:
            self.context.extra["field"] = field


class StoreError(GroupwiseError):
    """The group store could not be read or written."""

    error_code = ErrorCode.STORE_FAILED
    default_message = "Group store operation failed"
    default_suggestions = [
        "Check that the store file contains valid JSON",
        "Point GROUPWISE_STORE_PATH at a writable location",
    ]


class GroupNotFoundError(StoreError):
    """No group with the requested id exists in the store."""

    error_code = ErrorCode.GROUP_NOT_FOUND
    default_message = "Group not found"
    default_suggestions = ["Run 'groupwise group list' to see available group ids"]


class SubgroupNotFoundError(GroupwiseError):
    """No subgroup with the requested id exists in the round."""

    error_code = ErrorCode.SUBGROUP_NOT_FOUND
    default_message = "Subgroup not found in round"
