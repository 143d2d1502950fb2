"""Minimal angle and 2-D vector value types used by the samplers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import msgspec

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ['TAU', 'Angle', 'Vector2']

TAU = math.tau


class Vector2(msgspec.Struct, frozen=True, gc=False):
    """Immutable 2-D vector.

    Example:
        ```python
        v = Vector2(3.0, 4.0)
        v.length  # 5.0
        x, y = v
        ```
    """

    x: float
    y: float

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vector2:
        return Vector2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


class Angle(msgspec.Struct, frozen=True, gc=False):
    """Immutable angle in radians.

    Arithmetic accepts other angles or plain radians. Values are not wrapped
    into ``[0, 2π)``.
    """

    theta: float

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(math.radians(degrees))

    @property
    def degrees(self) -> float:
        return math.degrees(self.theta)

    def rotate_vec(self, vec: Vector2) -> Vector2:
        """Rotate ``vec`` counter-clockwise by this angle."""
        cos = math.cos(self.theta)
        sin = math.sin(self.theta)
        return Vector2(vec.x * cos - vec.y * sin, vec.x * sin + vec.y * cos)

    def __float__(self) -> float:
        return self.theta

    def __add__(self, other: Angle | float) -> Angle:
        return Angle(self.theta + float(other))

    def __sub__(self, other: Angle | float) -> Angle:
        return Angle(self.theta - float(other))

    def __mul__(self, scale: float) -> Angle:
        return Angle(self.theta * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Angle:
        return Angle(-self.theta)
