"""Tests for the Result outcome type."""

import pytest
from pydantic import ValidationError

from tankgame.util.result import Result


class TestResultConstruction:
    """Tests for ok/error constructors."""

    def test_ok_has_no_payload(self):
        """Test that a success carries no payload."""
        result = Result.ok()
        assert result.is_ok()
        assert not result.is_error()
        assert result.payload is None

    def test_error_carries_message(self):
        """Test that a failure carries its message."""
        result = Result[str].error("out of range")
        assert result.is_error()
        assert result.get_error() == "out of range"

    def test_error_carries_message_list(self):
        """Test condition-level payloads keep message order."""
        result = Result[list[str]].error(["A fails", "B fails"])
        assert result.get_error() == ["A fails", "B fails"]

    def test_failure_without_payload_rejected(self):
        """Test that a failure must carry a payload."""
        with pytest.raises(ValidationError):
            Result(success=False)

    def test_success_with_payload_rejected(self):
        """Test that a success cannot carry a payload."""
        with pytest.raises(ValidationError):
            Result(success=True, payload="oops")


class TestResultQueries:
    """Tests for result accessors."""

    def test_bool_follows_success(self):
        assert bool(Result.ok())
        assert not bool(Result.error("nope"))

    def test_get_error_on_success_raises(self):
        """Test that get_error on a success raises ValueError."""
        with pytest.raises(ValueError):
            Result.ok().get_error()

    def test_result_is_frozen(self):
        """Test that results cannot be mutated."""
        result = Result.error("nope")
        with pytest.raises(ValidationError):
            result.success = True
