"""
Tests for the Q&A domain layer.

Tests entities, storage errors and identifier validation in isolation.
No external dependencies or IO required.
"""

from dataclasses import FrozenInstanceError
from uuid import UUID, uuid4

import pytest

from app.domain.qa.entities import Question, QuestionDetail
from app.domain.qa.errors import (
    InvalidIdentifierError,
    StoreError,
    StoreOperationError,
)
from app.domain.qa.identifiers import parse_identifier


class TestEntities:
    """Tests for the domain records."""

    def test_detail_records_are_immutable(self) -> None:
        detail = QuestionDetail(
            question_uuid=str(uuid4()),
            title="t",
            description="d",
            created_at="2024-01-01 00:00:00",
        )
        with pytest.raises(FrozenInstanceError):
            detail.title = "changed"  # type: ignore[misc]

    def test_equal_values_compare_equal(self) -> None:
        assert Question(title="t", description="d") == Question(
            title="t", description="d"
        )


class TestStoreErrors:
    """Tests for the storage error taxonomy."""

    def test_invalid_identifier_keeps_message(self) -> None:
        err = InvalidIdentifierError("Invalid question UUID: abc")
        assert isinstance(err, StoreError)
        assert err.message == "Invalid question UUID: abc"
        assert str(err) == "Invalid question UUID: abc"

    def test_operation_error_keeps_cause(self) -> None:
        cause = ConnectionError("connection refused")
        err = StoreOperationError(cause)
        assert isinstance(err, StoreError)
        assert err.cause is cause
        assert "connection refused" in err.message
        assert "ConnectionError" in repr(err)

    def test_variants_are_distinct(self) -> None:
        assert not isinstance(
            StoreOperationError(RuntimeError("x")), InvalidIdentifierError
        )


class TestParseIdentifier:
    """Tests for identifier validation."""

    def test_valid_identifier_parses(self) -> None:
        value = str(uuid4())
        assert parse_identifier(value, "bad") == UUID(value)

    def test_upper_case_identifier_parses(self) -> None:
        value = str(uuid4())
        assert str(parse_identifier(value.upper(), "bad")) == value

    @pytest.mark.parametrize(
        "value", ["", "not-a-uuid", "123", "1234567-1234-1234-1234-123456789012"]
    )
    def test_malformed_identifier_raises(self, value: str) -> None:
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_identifier(value, f"Could not parse question UUID: {value}")
        assert exc_info.value.message == f"Could not parse question UUID: {value}"

    def test_non_string_raises(self) -> None:
        with pytest.raises(InvalidIdentifierError):
            parse_identifier(None, "bad")  # type: ignore[arg-type]
