"""Sampling error types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidCount',
    'InvalidCountError',
    'InvalidRange',
    'InvalidRangeError',
    'UnsupportedContainer',
    'UnsupportedContainerError',
]


# --- Range Errors ---


class InvalidRange(msgspec.Struct, frozen=True, gc=False):
    """Bounds do not describe a valid range - struct variant for value-based error handling."""

    min_value: int
    max_value: int
    reason: str | None = None

    def to_exception(self) -> InvalidRangeError:
        """Convert to exception for raise-based code."""
        return InvalidRangeError(self.min_value, self.max_value, self.reason)


class InvalidRangeError(ValueError):
    """Bounds do not describe a valid range - exception variant."""

    def __init__(self, min_value: int, max_value: int, reason: str | None = None) -> None:
        self.min_value = min_value
        self.max_value = max_value
        self.reason = reason
        msg = f'Invalid range [{min_value}, {max_value})'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)

    def to_struct(self) -> InvalidRange:
        """Convert to struct for value-based or serialized error handling."""
        return InvalidRange(self.min_value, self.max_value, self.reason)


# --- Selection Errors ---


class InvalidCount(msgspec.Struct, frozen=True, gc=False):
    """Requested sample size is negative - struct variant for value-based error handling."""

    count: int

    def to_exception(self) -> InvalidCountError:
        """Convert to exception for raise-based code."""
        return InvalidCountError(self.count)


class InvalidCountError(ValueError):
    """Requested sample size is negative - exception variant."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f'Sample count must be non-negative (count={count})')

    def to_struct(self) -> InvalidCount:
        """Convert to struct for value-based or serialized error handling."""
        return InvalidCount(self.count)


# --- Container Errors ---


class UnsupportedContainer(msgspec.Struct, frozen=True, gc=False):
    """Container cannot be shuffled in place - struct variant for value-based error handling."""

    type_name: str

    def to_exception(self) -> UnsupportedContainerError:
        """Convert to exception for raise-based code."""
        return UnsupportedContainerError(self.type_name)


class UnsupportedContainerError(TypeError):
    """Container cannot be shuffled in place - exception variant."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Cannot shuffle container of type '{type_name}' in place")

    def to_struct(self) -> UnsupportedContainer:
        """Convert to struct for value-based or serialized error handling."""
        return UnsupportedContainer(self.type_name)
