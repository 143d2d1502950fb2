"""Uniform sources: the raw entropy collaborators every sampler draws from.

A source only has to produce raw uniform draws. Everything else in the package
(ranges, vectors, shuffling, selection) is built on these five methods, so any
generator can be plugged in by implementing ``UniformSource``.

Sources are not thread-safe. Use one source per thread or guard a shared one
with a lock.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING, Protocol

import numpy as np

from klaw_sampling._logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Buffer

__all__ = [
    'NumpySource',
    'SourceKind',
    'StdlibSource',
    'UniformSource',
    'make_source',
]


class UniformSource(Protocol):
    """Protocol for raw uniform generators.

    Example:
        ```python
        class CountingSource:
            def __init__(self) -> None:
                self.calls = 0

            def next_uint32(self) -> int:
                self.calls += 1
                return 0
            ...
        ```
    """

    def next_uint32(self) -> int:
        """Return a uniform integer in ``[0, 2**32)``."""
        ...

    def next_uint64(self) -> int:
        """Return a uniform integer in ``[0, 2**64)``."""
        ...

    def next_float64(self) -> float:
        """Return a uniform float in ``[0.0, 1.0)``."""
        ...

    def fill_bytes(self, buffer: Buffer) -> None:
        """Overwrite every byte of a writable buffer with random bytes."""
        ...

    def reseed(self, seed: int | None) -> None:
        """Restart the stream from ``seed`` (``None`` draws OS entropy)."""
        ...


class SourceKind(Enum):
    """Built-in source implementations."""

    STDLIB = 'stdlib'
    NUMPY = 'numpy'


class StdlibSource:
    """Source backed by :class:`random.Random` (Mersenne Twister).

    Attributes:
        seed: The seed the stream was last started from, or None.
        kind: Always ``SourceKind.STDLIB``; tags this source's log events.
    """

    __slots__ = ('_random', 'seed')

    kind = SourceKind.STDLIB

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    @property
    def generator(self) -> random.Random:
        """The wrapped :class:`random.Random` instance."""
        return self._random

    def next_uint32(self) -> int:
        return self._random.getrandbits(32)

    def next_uint64(self) -> int:
        return self._random.getrandbits(64)

    def next_float64(self) -> float:
        return self._random.random()

    def fill_bytes(self, buffer: Buffer) -> None:
        view = memoryview(buffer).cast('B')
        view[:] = self._random.randbytes(view.nbytes)

    def reseed(self, seed: int | None) -> None:
        self.seed = seed
        self._random.seed(seed)
        get_logger(source=self).debug('source.reseeded', seed=seed)

    def __repr__(self) -> str:
        return f'StdlibSource(seed={self.seed!r})'


class NumpySource:
    """Source backed by a numpy ``Generator`` over the PCG64 bit generator.

    Integer draws read the bit generator's raw 64-bit output directly; float
    draws use ``Generator.random``.

    Attributes:
        seed: The seed the stream was last started from, or None.
        kind: Always ``SourceKind.NUMPY``; tags this source's log events.
    """

    __slots__ = ('_generator', 'seed')

    kind = SourceKind.NUMPY

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._generator = np.random.Generator(np.random.PCG64(seed))

    @property
    def generator(self) -> np.random.Generator:
        """The wrapped numpy ``Generator``."""
        return self._generator

    def next_uint32(self) -> int:
        return int(self._generator.bit_generator.random_raw()) >> 32

    def next_uint64(self) -> int:
        return int(self._generator.bit_generator.random_raw())

    def next_float64(self) -> float:
        return float(self._generator.random())

    def fill_bytes(self, buffer: Buffer) -> None:
        view = memoryview(buffer).cast('B')
        view[:] = self._generator.bytes(view.nbytes)

    def reseed(self, seed: int | None) -> None:
        self.seed = seed
        self._generator = np.random.Generator(np.random.PCG64(seed))
        get_logger(source=self).debug('source.reseeded', seed=seed)

    def __repr__(self) -> str:
        return f'NumpySource(seed={self.seed!r})'


def make_source(kind: SourceKind | str = SourceKind.STDLIB, seed: int | None = None) -> UniformSource:
    """Build a built-in source.

    Args:
        kind: Which implementation to use. Can be SourceKind or string ("stdlib", "numpy").
        seed: Seed for a reproducible stream. None = OS entropy.

    Returns:
        A fresh UniformSource.

    Raises:
        ValueError: If ``kind`` is an unknown string.

    Example:
        ```python
        from klaw_sampling import make_source, next_int

        source = make_source('numpy', seed=7)
        next_int(source, 1, 7)
        ```
    """
    resolved = SourceKind(kind.lower()) if isinstance(kind, str) else kind
    if resolved is SourceKind.NUMPY:
        return NumpySource(seed)
    return StdlibSource(seed)
