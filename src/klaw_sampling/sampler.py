"""Sampler: every sampling operation bound to one uniform source."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from klaw_sampling._config import default_source
from klaw_sampling.ranges import next_angle, next_byte, next_bytes, next_duration, next_float, next_int, prob
from klaw_sampling.selection import get_items
from klaw_sampling.shuffle import shuffle
from klaw_sampling.vectors import next_vector2, next_vector2_box, next_vector2_symmetric_box

if TYPE_CHECKING:
    from collections.abc import Buffer, Sequence
    from datetime import timedelta

    import numpy as np

    from klaw_sampling.geometry import Angle, Vector2
    from klaw_sampling.source import UniformSource

__all__ = ['Sampler']


class Sampler:
    """Convenience object that forwards to the free functions with a bound source.

    Holds no state besides the source, so two samplers over the same source
    share one stream.

    Example:
        ```python
        from klaw_sampling import Sampler, StdlibSource

        rng = Sampler(StdlibSource(seed=42))
        rng.next_int(1, 7)
        rng.get_items(['a', 'b', 'c'], 2, allow_duplicates=False)
        ```
    """

    __slots__ = ('_source',)

    def __init__(self, source: UniformSource | None = None) -> None:
        self._source = source if source is not None else default_source()

    def get_random(self) -> UniformSource:
        """Get the underlying source."""
        return self._source

    def set_seed(self, seed: int | None) -> None:
        """Reseed the underlying source."""
        self._source.reseed(seed)

    def next_float(self, *bounds: float) -> float:
        return next_float(self._source, *bounds)

    def next_double(self, *bounds: float) -> float:
        return next_float(self._source, *bounds)

    def next_int(self, *bounds: int) -> int:
        return next_int(self._source, *bounds)

    def next_byte(self, *bounds: int) -> int:
        return next_byte(self._source, *bounds)

    def next_duration(self, *bounds: timedelta) -> timedelta:
        return next_duration(self._source, *bounds)

    def next_angle(self, *bounds: Angle | float) -> Angle:
        return next_angle(self._source, *bounds)

    def next_bytes(self, buffer: Buffer) -> None:
        next_bytes(self._source, buffer)

    def prob(self, chance: float) -> bool:
        return prob(self._source, chance)

    def next_vector2(self, *magnitudes: float) -> Vector2:
        return next_vector2(self._source, *magnitudes)

    def next_vector2_box(self, min_x: float, min_y: float, max_x: float, max_y: float) -> Vector2:
        return next_vector2_box(self._source, min_x, min_y, max_x, max_y)

    def next_vector2_symmetric_box(self, max_abs_x: float = 1.0, max_abs_y: float = 1.0) -> Vector2:
        return next_vector2_symmetric_box(self._source, max_abs_x, max_abs_y)

    def shuffle(self, sequence: Any) -> None:
        shuffle(self._source, sequence)

    @overload
    def get_items(self, population: np.ndarray, count: int, allow_duplicates: bool = True) -> np.ndarray: ...
    @overload
    def get_items[T](self, population: Sequence[T], count: int, allow_duplicates: bool = True) -> list[T]: ...

    def get_items[T](
        self, population: Sequence[T] | np.ndarray, count: int, allow_duplicates: bool = True
    ) -> list[T] | np.ndarray:
        return get_items(self._source, population, count, allow_duplicates)

    def __repr__(self) -> str:
        return f'Sampler({self._source!r})'
