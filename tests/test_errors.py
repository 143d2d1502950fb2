"""Tests for sampling error types."""

import msgspec
import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_sampling import (
    InvalidCount,
    InvalidCountError,
    InvalidRange,
    InvalidRangeError,
    UnsupportedContainer,
    UnsupportedContainerError,
)


class TestInvalidRange:
    """Tests for InvalidRange / InvalidRangeError."""

    def test_message(self) -> None:
        assert str(InvalidRangeError(5, 1)) == 'Invalid range [5, 1)'
        assert str(InvalidRangeError(5, 1, 'inverted')) == 'Invalid range [5, 1): inverted'

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise InvalidRangeError(1, 0)

    @given(low=st.integers(), high=st.integers(), reason=st.none() | st.text(max_size=20))
    def test_conversions(self, low: int, high: int, reason: str | None) -> None:
        struct = InvalidRange(low, high, reason)
        exc = struct.to_exception()
        assert isinstance(exc, InvalidRangeError)
        assert exc.to_struct() == struct


class TestInvalidCount:
    """Tests for InvalidCount / InvalidCountError."""

    def test_message(self) -> None:
        assert 'count=-3' in str(InvalidCountError(-3))

    def test_conversions(self) -> None:
        assert InvalidCount(-1).to_exception().to_struct() == InvalidCount(-1)

    def test_is_value_error(self) -> None:
        assert issubclass(InvalidCountError, ValueError)


class TestUnsupportedContainer:
    """Tests for UnsupportedContainer / UnsupportedContainerError."""

    def test_message(self) -> None:
        assert str(UnsupportedContainerError('tuple')) == "Cannot shuffle container of type 'tuple' in place"

    def test_conversions(self) -> None:
        struct = UnsupportedContainer('frozenset')
        assert struct.to_exception().to_struct() == struct

    def test_is_type_error(self) -> None:
        assert issubclass(UnsupportedContainerError, TypeError)


class TestStructs:
    """Error structs are frozen msgspec values."""

    def test_frozen(self) -> None:
        struct = InvalidCount(-1)
        with pytest.raises(AttributeError):
            struct.count = 2  # type: ignore[misc]

    def test_json_roundtrip(self) -> None:
        struct = InvalidRange(3, 1, 'inverted')
        decoded = msgspec.json.decode(msgspec.json.encode(struct), type=InvalidRange)
        assert decoded == struct
