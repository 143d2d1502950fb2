"""In-place Fisher–Yates shuffling over any swappable container.

The algorithm only needs a length and a swap. ``as_swappable`` adapts each
container shape to that:

- ``SequenceView`` for any ``MutableSequence`` (list, deque, bytearray, array.array)
- ``Span`` for a fixed window ``[start, stop)`` of a mutable sequence
- ``ArrayView`` for numpy arrays, permuting along the first axis

Objects that already provide ``__len__`` and ``swap(i, j)`` are used as-is.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import TYPE_CHECKING, Any, Protocol, overload

import numpy as np

from klaw_sampling._dispatch import typeclass
from klaw_sampling.errors import UnsupportedContainerError
from klaw_sampling.ranges import next_int

if TYPE_CHECKING:
    from klaw_sampling.source import UniformSource

__all__ = [
    'ArrayView',
    'SequenceView',
    'Span',
    'Swappable',
    'as_swappable',
    'shuffle',
    'shuffle_tail',
]


class Swappable(Protocol):
    """Protocol for randomly indexable containers of known length that can swap two positions."""

    def __len__(self) -> int: ...

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at positions ``i`` and ``j``."""
        ...


class SequenceView[T]:
    """Swappable view over a ``MutableSequence``."""

    __slots__ = ('_items',)

    def __init__(self, items: MutableSequence[T]) -> None:
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]


class Span[T](Sequence[T]):
    """Fixed-size window ``[start, stop)`` over a mutable sequence or numpy array.

    Reads go straight to the underlying container. Swaps are delegated to the
    container's own adapter (``as_swappable``), so a span over a 2-D array
    exchanges whole rows. Shuffling a span permutes that slice of the original
    in place and leaves the rest untouched. ``start`` and ``stop`` follow
    slice semantics (negative values count from the end, out-of-range values
    are clamped).

    Raises:
        UnsupportedContainerError: If ``items`` cannot be permuted in place.

    Example:
        ```python
        deck = list(range(10))
        shuffle(source, Span(deck, 5))  # only deck[5:] moves
        ```
    """

    __slots__ = ('_items', '_view', 'start', 'stop')

    def __init__(self, items: MutableSequence[T] | np.ndarray, start: int = 0, stop: int | None = None) -> None:
        self._items = items
        self._view = as_swappable(items)
        self.start, self.stop, _ = slice(start, stop).indices(len(items))
        self.stop = max(self.stop, self.start)

    def __len__(self) -> int:
        return self.stop - self.start

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        return self._items[self._offset(index)]

    def swap(self, i: int, j: int) -> None:
        self._view.swap(self._offset(i), self._offset(j))

    def _offset(self, index: int) -> int:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            msg = 'span index out of range'
            raise IndexError(msg)
        return self.start + index

    def __repr__(self) -> str:
        return f'Span(start={self.start}, stop={self.stop})'


class ArrayView:
    """Swappable view over a numpy array's first axis.

    Rows are exchanged with fancy indexing, which copies before assigning and
    so is safe for multi-dimensional arrays.
    """

    __slots__ = ('_array',)

    def __init__(self, array: np.ndarray) -> None:
        if array.ndim == 0:
            raise UnsupportedContainerError('0-d ndarray')
        self._array = array

    def __len__(self) -> int:
        return self._array.shape[0]

    def swap(self, i: int, j: int) -> None:
        if i != j:
            self._array[[i, j]] = self._array[[j, i]]


@typeclass
def as_swappable(container: Any) -> Swappable:
    """Adapt ``container`` to the ``Swappable`` protocol.

    Raises:
        UnsupportedContainerError: If the container cannot be permuted in place.
    """
    if callable(getattr(container, 'swap', None)) and hasattr(container, '__len__'):
        return container
    raise UnsupportedContainerError(type(container).__name__)


@as_swappable.instance(MutableSequence)
def _sequence_view(container: MutableSequence[Any]) -> Swappable:
    return SequenceView(container)


@as_swappable.instance(np.ndarray)
def _array_view(container: np.ndarray) -> Swappable:
    return ArrayView(container)


def _fisher_yates(source: UniformSource, view: Swappable, steps: int) -> None:
    """Run ``steps`` backward Fisher–Yates steps, never going below index 1."""
    last = len(view) - 1
    stop = max(last - steps, 0)
    for n in range(last, stop, -1):
        view.swap(next_int(source, 0, n + 1), n)


def shuffle(source: UniformSource, sequence: Any) -> None:
    """Shuffle ``sequence`` in place.

    Performs ``len - 1`` swap steps (none for length 0 or 1). Each permutation
    is equally likely.

    Args:
        source: Uniform source to draw from.
        sequence: A MutableSequence, Span, numpy array or any Swappable.

    Raises:
        UnsupportedContainerError: If the container cannot be permuted in place.

    Example:
        ```python
        deck = list(range(52))
        shuffle(source, deck)
        ```
    """
    view = as_swappable(sequence)
    _fisher_yates(source, view, len(view) - 1)


def shuffle_tail(source: UniformSource, sequence: Any, count: int) -> None:
    """Partially shuffle ``sequence`` in place so its last ``count`` slots are a uniform sample.

    After the call the trailing ``count`` elements are distinct positions of
    the original, chosen uniformly and in uniformly random order. The rest is
    left in an unspecified order. ``count >= len - 1`` is a full shuffle.
    """
    view = as_swappable(sequence)
    _fisher_yates(source, view, count)
