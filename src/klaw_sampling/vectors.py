"""Random 2-D vectors built from the range samplers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from klaw_sampling.geometry import Vector2
from klaw_sampling.ranges import next_angle, next_float

if TYPE_CHECKING:
    from klaw_sampling.source import UniformSource

__all__ = [
    'next_vector2',
    'next_vector2_box',
    'next_vector2_symmetric_box',
]


def next_vector2(
    source: UniformSource,
    first: float = 1.0,
    second: float | None = None,
) -> Vector2:
    """Random vector from uniformly distributed angle and magnitude.

    ``next_vector2(source, max_magnitude)`` or
    ``next_vector2(source, min_magnitude, max_magnitude)``.

    The result is not uniform over the disk's area. Magnitudes are uniform
    along the radius, so there are as many points in ``[0, 0.5)`` as in
    ``[0.5, 1)`` and the density per unit area is higher near the center. On
    average this gives smaller magnitudes than ``next_vector2_box`` restricted
    to the same disk. Use ``next_vector2_box`` with rejection when area
    uniformity matters.
    """
    if second is None:
        min_magnitude, max_magnitude = 0.0, first
    else:
        min_magnitude, max_magnitude = first, second
    angle = next_angle(source)
    return angle.rotate_vec(Vector2(next_float(source, min_magnitude, max_magnitude), 0.0))


def next_vector2_box(
    source: UniformSource,
    min_x: float,
    min_y: float,
    max_x: float,
    max_y: float,
) -> Vector2:
    """Random vector uniformly distributed over the box ``[min_x, max_x] x [min_y, max_y]``."""
    return Vector2(next_float(source, min_x, max_x), next_float(source, min_y, max_y))


def next_vector2_symmetric_box(
    source: UniformSource,
    max_abs_x: float = 1.0,
    max_abs_y: float = 1.0,
) -> Vector2:
    """Random vector uniformly distributed over ``[-max_abs_x, max_abs_x] x [-max_abs_y, max_abs_y]``."""
    return next_vector2_box(source, -max_abs_x, -max_abs_y, max_abs_x, max_abs_y)
