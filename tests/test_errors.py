"""Tests for the groupwise exception hierarchy."""

from __future__ import annotations

import pytest

from groupwise.errors import (
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


class TestErrorCode:
    """Codes and categories."""

    @pytest.mark.parametrize(
        "code,category",
        [
            (ErrorCode.VALIDATION_FAILED, "validation"),
            (ErrorCode.INVALID_SIZE, "validation"),
            (ErrorCode.INVALID_CONFIG, "validation"),
            (ErrorCode.STORE_FAILED, "storage"),
            (ErrorCode.GROUP_NOT_FOUND, "storage"),
            (ErrorCode.SUBGROUP_NOT_FOUND, "schedule"),
            (ErrorCode.UNKNOWN, "unknown"),
        ],
    )
    def test_category(self, code, category):
        assert code.category == category

    def test_codes_are_unique(self):
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))


class TestErrorContext:
    """Structured context."""

    def test_format_location(self):
        context = ErrorContext(group_id="g1", operation="get")
        assert context.format_location() == "operation=get > group=g1"

    def test_format_location_empty(self):
        assert ErrorContext().format_location() == "unknown location"

    def test_to_dict_drops_none(self):
        data = ErrorContext(operation="save").to_dict()

        assert data["operation"] == "save"
        assert "group_id" not in data
        assert "timestamp" in data


class TestGroupwiseError:
    """Base exception behaviour."""

    def test_default_message(self):
        error = GroupwiseError()

        assert error.message == "Unexpected groupwise error"
        assert error.error_code == ErrorCode.UNKNOWN
        assert str(error) == "[E999] Unexpected groupwise error"

    def test_str_includes_location(self):
        error = StoreError("disk full", context=ErrorContext(operation="save"))

        assert str(error) == "[E301] disk full | at operation=save"

    def test_extra_context_kwargs(self):
        error = InvalidSizeError(size=3)

        assert error.context.extra == {"size": 3}

    def test_suggestions_override(self):
        error = InvalidSizeError(suggestions=["Try pairs"])

        assert error.suggestions == ["Try pairs"]

    def test_default_suggestions_are_copied(self):
        error = InvalidSizeError()
        error.suggestions.append("mutated")

        assert "mutated" not in InvalidSizeError().suggestions

    def test_format_verbose(self):
        error = GroupNotFoundError("Group 'x' not found", context=ErrorContext(group_id="x"))
        text = error.format_verbose()

        assert text.startswith("Error [E302]: Group 'x' not found")
        assert "Location: group=x" in text
        assert "Suggestions:" in text
        assert "groupwise group list" in text

    def test_to_dict(self):
        cause = OSError("read-only")
        error = StoreError("Could not write", cause=cause)
        data = error.to_dict()

        assert data["error_code"] == "E301"
        assert data["category"] == "storage"
        assert data["error_type"] == "StoreError"
        assert data["message"] == "Could not write"
        assert data["cause"] == "read-only"
        assert data["suggestions"]


class TestHierarchy:
    """Subclass relationships callers rely on."""

    @pytest.mark.parametrize(
        "error_class,parent",
        [
            (ValidationError, GroupwiseError),
            (InvalidSizeError, ValidationError),
            (InvalidMemberError, ValidationError),
            (ConfigValidationError, ValidationError),
            (StoreError, GroupwiseError),
            (GroupNotFoundError, StoreError),
            (SubgroupNotFoundError, GroupwiseError),
        ],
    )
    def test_subclass(self, error_class, parent):
        assert issubclass(error_class, parent)

    def test_not_a_value_error(self):
        # Raised from pydantic validators without being wrapped
        assert not issubclass(ConfigValidationError, ValueError)

    def test_config_error_records_field(self):
        error = ConfigValidationError("bad", field="default_size", value=0)

        assert error.field == "default_size"
        assert error.value == 0
        assert error.context.extra["field"] == "default_size"
        assert error.error_code == ErrorCode.INVALID_CONFIG

    def test_invalid_member_default_message(self):
        assert InvalidMemberError().message == "Member name cannot be empty"
