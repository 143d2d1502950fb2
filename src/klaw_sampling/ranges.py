"""Range samplers: raw uniform draws scaled into bounded values.

Every function takes the source as its first argument and follows the
``range()`` calling convention for bounds: one bound is the maximum (the
minimum defaults to the type's zero), two bounds are ``(min, max)``.

Integer ranges are half-open and unbiased. Float, duration and angle ranges
use ``u * (max - min) + min`` with ``u`` in ``[0, 1)``; they do not guard
inverted bounds, which extrapolate linearly instead of swapping or raising.
"""

from __future__ import annotations

import operator
from datetime import timedelta
from typing import TYPE_CHECKING, overload

from klaw_sampling.errors import InvalidRangeError
from klaw_sampling.geometry import TAU, Angle

if TYPE_CHECKING:
    from collections.abc import Buffer, Callable

    from klaw_sampling.source import UniformSource

__all__ = [
    'next_angle',
    'next_byte',
    'next_bytes',
    'next_duration',
    'next_float',
    'next_int',
    'prob',
    'uniform_float',
]

_INT32_MAX = 2**31 - 1
_UINT32_RANGE = 1 << 32
_UINT64_RANGE = 1 << 64
_BYTE_MAX = 255


def _bounds[T](first: T, second: T | None, zero: T) -> tuple[T, T]:
    if second is None:
        return zero, first
    return first, second


# --- Unbiased integer bounding ---


def _lemire(draw: Callable[[], int], span: int, bits: int) -> int:
    """Multiply-shift reduction of a ``bits``-wide draw into ``[0, span)``.

    Products whose low word falls under ``2**bits mod span`` are rejected, which
    leaves every output with exactly the same number of accepted draws.
    """
    mask = (1 << bits) - 1
    product = draw() * span
    low = product & mask
    if low < span:
        threshold = ((1 << bits) - span) % span
        while low < threshold:
            product = draw() * span
            low = product & mask
    return product >> bits


def _masked(source: UniformSource, span: int) -> int:
    """Rejection sampling for spans wider than 64 bits."""
    bits = (span - 1).bit_length()
    words = -(-bits // 64)
    mask = (1 << bits) - 1
    while True:
        value = 0
        for _ in range(words):
            value = (value << 64) | source.next_uint64()
        value &= mask
        if value < span:
            return value


def _bounded(source: UniformSource, span: int) -> int:
    """Uniform integer in ``[0, span)`` for ``span >= 1``."""
    if span <= _UINT32_RANGE:
        return _lemire(source.next_uint32, span, 32)
    if span <= _UINT64_RANGE:
        return _lemire(source.next_uint64, span, 64)
    return _masked(source, span)


# --- Public samplers ---


def uniform_float(source: UniformSource) -> float:
    """Return a float in ``[0.0, 1.0)`` from a single raw draw."""
    return source.next_float64()


@overload
def next_float(source: UniformSource, /) -> float: ...
@overload
def next_float(source: UniformSource, max_value: float, /) -> float: ...
@overload
def next_float(source: UniformSource, min_value: float, max_value: float, /) -> float: ...


def next_float(
    source: UniformSource,
    first: float | None = None,
    second: float | None = None,
    /,
) -> float:
    """Return a float between two bounds.

    Args:
        source: Uniform source to draw from.
        first: ``max_value`` when alone, otherwise ``min_value``.
        second: ``max_value`` when both bounds are given.

    Returns:
        A value in ``[min, max]``. Rounding can make ``max`` unreachable.
        With no bounds, a value in ``[0.0, 1.0)``. If ``max < min`` the result
        is ``u * (max - min) + min`` taken literally, i.e. a value in
        ``(max, min]``.

    Example:
        ```python
        next_float(source)            # [0, 1)
        next_float(source, 10.0)      # [0, 10]
        next_float(source, -1.0, 1.0) # [-1, 1]
        ```
    """
    if first is None:
        return source.next_float64()
    min_value, max_value = _bounds(first, second, 0.0)
    return source.next_float64() * (max_value - min_value) + min_value


@overload
def next_int(source: UniformSource, /) -> int: ...
@overload
def next_int(source: UniformSource, max_value: int, /) -> int: ...
@overload
def next_int(source: UniformSource, min_value: int, max_value: int, /) -> int: ...


def next_int(
    source: UniformSource,
    first: int | None = None,
    second: int | None = None,
    /,
) -> int:
    """Return an integer from a half-open range without modulo bias.

    Args:
        source: Uniform source to draw from.
        first: ``max_value`` when alone, otherwise ``min_value``.
        second: ``max_value`` when both bounds are given.

    Returns:
        A value in ``[min, max)``. ``min == max`` returns ``min`` without
        drawing. With no bounds, a value in ``[0, 2**31 - 1)``.

    Raises:
        InvalidRangeError: If ``max < min``.
        TypeError: If a bound is not an integer.
    """
    if first is None:
        return _bounded(source, _INT32_MAX)
    min_value, max_value = _bounds(operator.index(first), second, 0)
    max_value = operator.index(max_value)
    if max_value < min_value:
        raise InvalidRangeError(min_value, max_value, 'max_value is less than min_value')
    span = max_value - min_value
    if span == 0:
        return min_value
    return min_value + _bounded(source, span)


def next_byte(
    source: UniformSource,
    first: int | None = None,
    second: int | None = None,
) -> int:
    """Return a byte value in ``[min, max)``.

    With no bounds the range is ``[0, 255)``, so 255 itself is never drawn.

    Raises:
        InvalidRangeError: If a bound is outside ``[0, 255]`` or ``max < min``.
    """
    if first is None:
        first = _BYTE_MAX
    min_value, max_value = _bounds(first, second, 0)
    if not (0 <= min_value <= _BYTE_MAX and 0 <= max_value <= _BYTE_MAX):
        raise InvalidRangeError(min_value, max_value, 'byte bounds must lie in [0, 255]')
    return next_int(source, min_value, max_value)


def next_duration(
    source: UniformSource,
    first: timedelta,
    second: timedelta | None = None,
) -> timedelta:
    """Return a duration between two bounds, ``timedelta(0)`` being the default minimum.

    Resolution is one microsecond. Inverted bounds extrapolate like ``next_float``.
    """
    min_value, max_value = _bounds(first, second, timedelta(0))
    return source.next_float64() * (max_value - min_value) + min_value


def next_angle(
    source: UniformSource,
    first: Angle | float | None = None,
    second: Angle | float | None = None,
) -> Angle:
    """Return an angle between two bounds.

    With no bounds the result is uniform over a full turn, ``[0, 2π)``.
    Bounds may be ``Angle`` or plain radians. Inverted bounds extrapolate.
    """
    if first is None:
        return Angle(source.next_float64() * TAU)
    min_value, max_value = _bounds(first, second, 0.0)
    span = Angle(float(max_value) - float(min_value))
    return source.next_float64() * span + float(min_value)


def next_bytes(source: UniformSource, buffer: Buffer) -> None:
    """Fill a writable buffer with independently drawn random bytes."""
    source.fill_bytes(buffer)


def prob(source: UniformSource, chance: float) -> bool:
    """Return True with probability ``chance``."""
    return source.next_float64() < chance
