"""Fixed-size random selection from a population, with or without repeats."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, overload

import numpy as np

from klaw_sampling._dispatch import typeclass
from klaw_sampling._logging import get_logger
from klaw_sampling.errors import InvalidCountError
from klaw_sampling.ranges import next_int
from klaw_sampling.shuffle import shuffle, shuffle_tail

if TYPE_CHECKING:
    from collections.abc import Sequence

    from klaw_sampling.source import UniformSource

__all__ = ['gather', 'get_items']


@typeclass
def gather(population: Any, indices: Sequence[int]) -> Any:
    """Build a new collection holding ``population[i]`` for each index, in order.

    Sequences produce a list. numpy arrays produce a new array of the same
    dtype taken along the first axis.
    """
    return [population[i] for i in indices]


@gather.instance(np.ndarray)
def _gather_array(population: np.ndarray, indices: Sequence[int]) -> np.ndarray:
    return population[np.asarray(indices, dtype=np.intp)]


@overload
def get_items(
    source: UniformSource, population: np.ndarray, count: int, allow_duplicates: bool = True
) -> np.ndarray: ...
@overload
def get_items[T](
    source: UniformSource, population: Sequence[T], count: int, allow_duplicates: bool = True
) -> list[T]: ...


def get_items[T](
    source: UniformSource,
    population: Sequence[T] | np.ndarray,
    count: int,
    allow_duplicates: bool = True,
) -> list[T] | np.ndarray:
    """Pick ``count`` random items from ``population``.

    With ``allow_duplicates`` every pick is an independent uniform index, so
    the result always has ``count`` items and may repeat some.

    Without duplicates the result holds distinct positions of the population.
    If the population has no more than ``count`` items the whole population is
    returned in shuffled order (a clone, never an error). Otherwise a partial
    Fisher–Yates over the positions picks ``count`` of them uniformly.

    ``population`` itself is never modified. An empty population or
    ``count == 0`` gives an empty result.

    Args:
        source: Uniform source to draw from.
        population: Any randomly indexable sequence or numpy array.
        count: Number of items wanted.
        allow_duplicates: Whether the same position may be picked twice.

    Returns:
        A new list (or a new ndarray for ndarray populations).

    Raises:
        InvalidCountError: If ``count`` is negative.

    Example:
        ```python
        get_items(source, ['a', 'b', 'c'], 5, allow_duplicates=False)
        # e.g. ['c', 'a', 'b']
        get_items(source, range(10), 3)
        # e.g. [7, 7, 2]
        ```
    """
    count = operator.index(count)
    if count < 0:
        raise InvalidCountError(count)

    size = len(population)
    if count == 0 or size == 0:
        return gather(population, [])

    if allow_duplicates:
        return gather(population, [next_int(source, size) for _ in range(count)])

    positions = list(range(size))
    if size <= count:
        get_logger(source=source).debug(
            'selection.count_exceeds_population',
            count=count,
            population=size,
        )
        shuffle(source, positions)
        return gather(population, positions)

    shuffle_tail(source, positions, count)
    return gather(population, positions[size - count :])
